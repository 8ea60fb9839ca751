"""Product code generation.

A product code has the form ``<hash8>-<first><runs><last>``:

- ``hash8`` is the first 8 hex characters of the SHA-1 of the name as given.
- ``runs`` concatenates every strictly increasing run of UTF-16 code units
  of the lowercased name that ties for the longest length, left to right.
- ``first`` and ``last`` are the start and end code unit indexes of the
  first of those runs only, even when several runs are concatenated.

Characters outside the Basic Multilingual Plane count as two code units
(a surrogate pair), so their indexes match UTF-16 string offsets.

Codes are not guaranteed unique; uniqueness is enforced by storage.
"""

import hashlib
from dataclasses import dataclass

from catalog_api.domain.exceptions import InvalidProductNameError

HASH_PREFIX_LENGTH = 8
UTF16 = "utf-16-le"


@dataclass(frozen=True)
class AscendingRun:
    """A maximal strictly increasing run of UTF-16 code units.

    Attributes:
        text: The run's characters.
        start: Code unit index of the run's first unit.
        length: Number of code units in the run.
    """

    text: str
    start: int
    length: int

    @property
    def end(self) -> int:
        """Code unit index of the run's last unit."""
        return self.start + self.length - 1


def code_units(value: str) -> list[int]:
    """Split a string into its UTF-16 code units."""
    data = value.encode(UTF16, "surrogatepass")
    return [int.from_bytes(data[k : k + 2], "little") for k in range(0, len(data), 2)]


def _units_to_text(units: list[int]) -> str:
    data = b"".join(unit.to_bytes(2, "little") for unit in units)
    # lone surrogates only come from malformed input
    return data.decode(UTF16, "replace")


def longest_ascending_runs(value: str) -> list[AscendingRun]:
    """Find all maximal ascending runs tied for the longest length.

    Runs are compared by UTF-16 code unit and never overlap. The scan is a
    single left-to-right pass. A surrogate pair always ascends, so a run
    never ends between its two halves.

    Args:
        value: String to scan (case is not altered here).

    Returns:
        Tied longest runs in the order they occur. Empty for an empty string.
    """
    units = code_units(value)
    longest: list[AscendingRun] = []
    max_len = 0
    n = len(units)
    i = 0

    while i < n:
        j = i
        while j + 1 < n and units[j] < units[j + 1]:
            j += 1

        length = j - i + 1
        if length >= max_len:
            run = AscendingRun(text=_units_to_text(units[i : j + 1]), start=i, length=length)
            if length > max_len:
                max_len = length
                longest = [run]
            else:
                longest.append(run)

        i = j + 1

    return longest


def name_hash(product_name: str) -> str:
    """Short SHA-1 fingerprint of the name, case preserved."""
    well_formed = product_name.encode(UTF16, "surrogatepass").decode(UTF16, "replace")
    digest = hashlib.sha1(well_formed.encode("utf-8")).hexdigest()
    return digest[:HASH_PREFIX_LENGTH]


def generate_product_code(product_name: str) -> str:
    """Derive a product code from a product name.

    Args:
        product_name: Product display name.

    Returns:
        Product code string.

    Raises:
        InvalidProductNameError: If the name is empty.
    """
    if not product_name:
        raise InvalidProductNameError(product_name)

    runs = longest_ascending_runs(product_name.lower())
    first = runs[0].start
    last = runs[0].end
    concat = "".join(run.text for run in runs)

    return f"{name_hash(product_name)}-{first}{concat}{last}"
