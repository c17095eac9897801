"""
Generate the Manhattan catalog against the real geocoding provider and
dump it as JSON, for seeding or eyeballing the output during development.

    geoprice-generate                 # print to stdout
    geoprice-generate -o areas.json   # write to a file
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from ..core.config import settings
from ..core.logging import configure_logging
from ..data.catalog import MANHATTAN_NEIGHBORHOODS
from ..data.geocode_client import geocoding_adapter
from ..services.area_generator import AreaGenerator

logger = logging.getLogger(__name__)

async def generate() -> list[dict]:
    generator = AreaGenerator(geocoding_adapter(), request_delay=settings.GEOCODE_REQUEST_DELAY_SECONDS)
    areas = await generator.generate_catalog(MANHATTAN_NEIGHBORHOODS)
    return [a.model_dump(mode="json", by_alias=True, exclude_none=True) for a in areas]

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate land areas from geocoded neighborhoods")
    parser.add_argument("-o", "--output", type=Path, help="write JSON here instead of stdout")
    args = parser.parse_args(argv)

    configure_logging(settings.LOG_LEVEL)

    if not settings.geocoding_enabled:
        logger.error("GOOGLE_MAPS_API_KEY environment variable is required")
        print("Please set GOOGLE_MAPS_API_KEY=your_api_key in the environment", file=sys.stderr)
        return 1

    logger.info("Starting to generate Manhattan land areas...")
    areas = asyncio.run(generate())
    payload = json.dumps(areas, indent=2)
    if args.output:
        args.output.write_text(payload + "\n", encoding="utf-8")
        logger.info(f"Wrote {len(areas)} areas to {args.output}")
    else:
        print(payload)
    return 0

if __name__ == "__main__":
    sys.exit(main())
