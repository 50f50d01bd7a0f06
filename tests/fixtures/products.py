"""Sample product catalog shared by datatable tests."""

from dynamic_datatable.schema import ColumnDef, FilterField


def make_products():
    """Return a fresh list of product records."""
    return [
        {
            "id": 1,
            "name": "Laptop",
            "category": "Electronics",
            "price": 999.99,
            "stock": 50,
            "rating": 4.5,
            "image": "https://example.com/laptop.jpg",
        },
        {
            "id": 2,
            "name": "Smartphone",
            "category": "Electronics",
            "price": 699.99,
            "stock": 100,
            "rating": 4.2,
            "image": "https://example.com/smartphone.jpg",
        },
        {
            "id": 3,
            "name": "Headphones",
            "category": "Audio",
            "price": 149.99,
            "stock": 200,
            "rating": 4.7,
            "image": "https://example.com/headphones.jpg",
        },
        {
            "id": 4,
            "name": "Coffee Maker",
            "category": "Appliances",
            "price": 79.99,
            "stock": 30,
            "rating": 4.0,
            "image": "https://example.com/coffee.jpg",
        },
        {
            "id": 5,
            "name": "Fitness Tracker",
            "category": "Wearables",
            "price": 129.99,
            "stock": 75,
            "rating": 4.3,
            "image": "https://example.com/tracker.jpg",
        },
    ]


def format_rating(value):
    return f"⭐ {value:.1f}"


PRODUCT_COLUMNS = [
    ColumnDef(key="image", header="Image", type="image"),
    ColumnDef(key="name", header="Name", type="text"),
    ColumnDef(key="category", header="Category", type="badge"),
    ColumnDef(key="price", header="Price", type="money"),
    ColumnDef(key="stock", header="Stock", type="number", show_on_mobile=False),
    ColumnDef(key="rating", header="Rating", type="icon", format_fn=format_rating),
    ColumnDef(key="actions", header="Actions", type="actions"),
]

PRODUCT_FILTER_FIELDS = [
    FilterField(key="name", label="Name", type="text"),
    FilterField(
        key="category",
        label="Category",
        type="select",
        options=["Electronics", "Audio", "Appliances", "Wearables"],
    ),
    FilterField(key="price", label="Max Price", type="number"),
]
