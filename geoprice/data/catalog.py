from .base import CatalogPlace

def _manhattan(name: str, type: str, estimated_price: float) -> CatalogPlace:
    return CatalogPlace(
        name=name,
        search_term=f"{name}, Manhattan, New York, NY",
        type=type,
        estimated_price=estimated_price,
    )

# Neighborhoods seeded in geocoded mode, in output order
MANHATTAN_NEIGHBORHOODS = (
    _manhattan("Financial District", "commercial", 850),
    _manhattan("SoHo", "commercial", 775),
    _manhattan("Greenwich Village", "residential", 695),
    _manhattan("Chelsea", "commercial", 680),
    _manhattan("Midtown", "commercial", 925),
    _manhattan("Upper East Side", "residential", 1150),
    _manhattan("Upper West Side", "residential", 1000),
    _manhattan("Tribeca", "residential", 1300),
    _manhattan("East Village", "residential", 580),
    _manhattan("Hell's Kitchen", "residential", 720),
)
