"""Sample catalog data for development databases.

Products reference their category by index into ``SAMPLE_CATEGORIES``.
Their product codes are fixed rather than generated.
"""

from typing import Any

SAMPLE_CATEGORIES: list[dict[str, str]] = [
    {"name": "Electronics", "description": "Electronic devices and gadgets"},
    {"name": "Clothing", "description": "Apparel and fashion items"},
    {"name": "Books", "description": "Books and educational materials"},
    {"name": "Home & Garden", "description": "Home improvement and gardening"},
    {"name": "Sports", "description": "Sports equipment and accessories"},
    {"name": "Beauty", "description": "Beauty and personal care products"},
]

SAMPLE_PRODUCTS: list[dict[str, Any]] = [
    {
        "name": "iPhone 15 Pro",
        "description": "Latest Apple smartphone with advanced features and A17 Pro chip",
        "price": 999,
        "discount": 10,
        "image": "iphone15-pro.jpg",
        "category_index": 0,
        "product_code": "IPH-15P-001",
    },
    {
        "name": "Samsung Galaxy S24 Ultra",
        "description": "High-end Android smartphone with S Pen and AI features",
        "price": 1199,
        "discount": 15,
        "image": "galaxy-s24-ultra.jpg",
        "category_index": 0,
        "product_code": "SAM-S24U-001",
    },
    {
        "name": "MacBook Pro 14-inch",
        "description": "Apple MacBook Pro with M3 chip for professional work",
        "price": 1999,
        "discount": 5,
        "image": "macbook-pro-14.jpg",
        "category_index": 0,
        "product_code": "APP-MBP14-001",
    },
    {
        "name": "Nike Air Max 270",
        "description": "Comfortable running shoes with Air Max technology",
        "price": 150,
        "discount": 25,
        "image": "nike-air-max-270.jpg",
        "category_index": 1,
        "product_code": "NIK-AM270-001",
    },
    {
        "name": "Adidas Ultraboost 22",
        "description": "Premium running shoes with Boost technology",
        "price": 180,
        "discount": 20,
        "image": "adidas-ultraboost-22.jpg",
        "category_index": 1,
        "product_code": "ADI-UB22-001",
    },
    {
        "name": "JavaScript: The Definitive Guide",
        "description": "Comprehensive guide to JavaScript programming",
        "price": 59.99,
        "discount": 0,
        "image": "js-definitive-guide.jpg",
        "category_index": 2,
        "product_code": "ORE-JDG-001",
    },
    {
        "name": "Clean Code",
        "description": "A handbook of agile software craftsmanship",
        "price": 49.99,
        "discount": 10,
        "image": "clean-code.jpg",
        "category_index": 2,
        "product_code": "PH-CC-001",
    },
    {
        "name": "Robot Vacuum Cleaner",
        "description": "Smart robot vacuum with mapping and app control",
        "price": 299,
        "discount": 30,
        "image": "robot-vacuum.jpg",
        "category_index": 3,
        "product_code": "RV-SMART-001",
    },
    {
        "name": "Garden Tool Set",
        "description": "Complete 10-piece garden tool set for all your gardening needs",
        "price": 79.99,
        "discount": 15,
        "image": "garden-tool-set.jpg",
        "category_index": 3,
        "product_code": "GTS-10P-001",
    },
    {
        "name": "Yoga Mat Premium",
        "description": "High-quality non-slip yoga mat for all fitness levels",
        "price": 49.99,
        "discount": 5,
        "image": "yoga-mat-premium.jpg",
        "category_index": 4,
        "product_code": "YM-PREM-001",
    },
    {
        "name": "Dumbbell Set",
        "description": "Adjustable dumbbell set for home workouts",
        "price": 199,
        "discount": 20,
        "image": "dumbbell-set.jpg",
        "category_index": 4,
        "product_code": "DB-ADJ-001",
    },
    {
        "name": "Skincare Set",
        "description": "Complete skincare routine with cleanser, serum, and moisturizer",
        "price": 89.99,
        "discount": 25,
        "image": "skincare-set.jpg",
        "category_index": 5,
        "product_code": "SC-SET-001",
    },
]
