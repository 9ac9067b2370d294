"""
Command Line Interface

Entry point for querying the Places API from the command line.

Usage:
    python -m google_places_api text "coffee" --pages 3
    python -m google_places_api nearby 46.7749,23.62 --radius 1000 --type cafe
    python -m google_places_api details ChIJN1t_tDeuEmsRUsoyG83frY4
    python -m google_places_api serve --port 8000
"""

import argparse
import asyncio
import logging
import sys

from .client import GooglePlacesAPI
from .config import API_HOST, API_PORT, DEFAULT_MAX_PAGES
from .exceptions import GooglePlacesError
from .export import write_csv, write_json
from .models import InputType, Language, Location, RankBy


def _add_search_args(parser: argparse.ArgumentParser):
    parser.add_argument("--radius", type=float, help="Search radius in meters")
    parser.add_argument("--type", dest="place_type", help="Place type filter (e.g. cafe)")
    parser.add_argument("--language", type=Language, help="Result language (e.g. en)")
    parser.add_argument("--min-price", type=int, choices=range(5), help="Minimum price level")
    parser.add_argument("--max-price", type=int, choices=range(5), help="Maximum price level")
    parser.add_argument("--open-now", action="store_true", help="Only places open now")
    parser.add_argument(
        "-p", "--pages",
        type=int,
        default=DEFAULT_MAX_PAGES,
        help=f"Maximum pages to fetch (default: {DEFAULT_MAX_PAGES})"
    )
    parser.add_argument("-o", "--output", help="Write places to this JSON file")
    parser.add_argument("--csv", help="Write places to this CSV file")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="google-places",
        description="Google Places API client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  google-places text "coffee" --pages 3 -o output/coffee.json
  google-places text "museums in Paris" --language fr --csv output/museums.csv
  google-places nearby 46.7749,23.62 --radius 1000 --type cafe
  google-places find "Museum of Contemporary Art Australia"
  google-places details ChIJN1t_tDeuEmsRUsoyG83frY4
  google-places photo PHOTO_REFERENCE --max-width 800 -o photo.jpg
        """
    )
    parser.add_argument("--api-key", help="API key (default: $GOOGLE_PLACES_API_KEY)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Suppress progress output")

    sub = parser.add_subparsers(dest="command", required=True)

    text = sub.add_parser("text", help="Text search")
    text.add_argument("query", help="Text to search for")
    text.add_argument("--location", type=Location.parse, help="Bias location as lat,lng")
    text.add_argument("--region", help="Region code (ccTLD) to bias results")
    _add_search_args(text)

    nearby = sub.add_parser("nearby", help="Nearby search")
    nearby.add_argument("location", type=Location.parse, help="Center as lat,lng")
    nearby.add_argument("--keyword", help="Keyword to match")
    nearby.add_argument("--rank-by", type=RankBy, help="prominence or distance")
    _add_search_args(nearby)

    find = sub.add_parser("find", help="Find place from text or phone number")
    find.add_argument("input", help="Text or phone number")
    find.add_argument("--phone", action="store_true", help="Input is a phone number")
    find.add_argument("--fields", help="Comma-separated fields to return")

    details = sub.add_parser("details", help="Place details")
    details.add_argument("place_id", help="Place ID")
    details.add_argument("--fields", help="Comma-separated fields to return")
    details.add_argument("--language", type=Language, help="Result language")

    photo = sub.add_parser("photo", help="Download a place photo")
    photo.add_argument("photo_reference", help="Photo reference from a search result")
    photo.add_argument("--max-width", type=int, default=800, help="Maximum width (default: 800)")
    photo.add_argument("--max-height", type=int, help="Maximum height")
    photo.add_argument("-o", "--output", required=True, help="Output image path")

    serve = sub.add_parser("serve", help="Run the HTTP API server")
    serve.add_argument("--host", default=API_HOST, help=f"Bind address (default: {API_HOST})")
    serve.add_argument("--port", type=int, default=API_PORT, help=f"Port (default: {API_PORT})")

    return parser


def _apply_search_args(search, args):
    if args.radius is not None:
        search.with_radius(args.radius)
    if args.place_type:
        search.with_type(args.place_type)
    if args.language is not None:
        search.with_language(args.language)
    if args.min_price is not None:
        search.with_min_price(args.min_price)
    if args.max_price is not None:
        search.with_max_price(args.max_price)
    if args.open_now:
        search.with_open_now(True)
    return search


def _print_places(places):
    for i, place in enumerate(places, 1):
        rating = f" ({place.rating})" if place.rating is not None else ""
        address = place.formatted_address or place.vicinity or ""
        print(f"  [{i}] {place.name}{rating} - {address}")


def _write_outputs(result, args, metadata):
    if args.output:
        count = write_json(args.output, result.places, metadata)
        if not args.quiet:
            print(f"Saved {count} places to {args.output}")
    if args.csv:
        count = write_csv(args.csv, result.places)
        if not args.quiet:
            print(f"Saved {count} places to {args.csv}")


async def _run_search(api: GooglePlacesAPI, args) -> int:
    if args.command == "text":
        search = _apply_search_args(api.text_search().with_query(args.query), args)
        if args.location is not None:
            search.with_location(args.location)
        if args.region:
            search.with_region(args.region)
    else:
        search = _apply_search_args(api.nearby_search().with_location(args.location), args)
        if args.keyword:
            search.with_keyword(args.keyword)
        if args.rank_by is not None:
            search.with_rank_by(args.rank_by)

    await search.execute(args.pages)
    result = search.get_result()

    if not args.quiet:
        print("=" * 70)
        print(f"Status: {result.status} | Pages: {result.pages_fetched} | Places: {len(result.places)}")
        if result.error_message:
            print(f"Error message: {result.error_message}")
        if result.is_truncated:
            print(f"More results available (page token: {result.next_page_token})")
        print("=" * 70)
        _print_places(search)

    metadata = {"command": args.command, "criteria": repr(search.criteria), "status": str(result.status)}
    _write_outputs(result, args, metadata)
    return 0


async def _run(args) -> int:
    async with GooglePlacesAPI(args.api_key) as api:
        if args.command in ("text", "nearby"):
            return await _run_search(api, args)

        if args.command == "find":
            query = api.find_place().with_input(args.input).with_input_type(
                InputType.PHONE_NUMBER if args.phone else InputType.TEXT_QUERY
            )
            if args.fields:
                query.with_fields(f.strip() for f in args.fields.split(","))
            await query.execute()
            result = query.get_result()
            print(f"Status: {result.status} | Candidates: {len(result.candidates)}")
            _print_places(query)
            return 0

        if args.command == "details":
            query = api.place_details().with_place_id(args.place_id)
            if args.fields:
                query.with_fields(f.strip() for f in args.fields.split(","))
            if args.language is not None:
                query.with_language(args.language)
            await query.execute()
            print(query.get_details().model_dump_json(indent=2, exclude_none=True))
            return 0

        # photo
        query = api.place_photos().with_photo_reference(args.photo_reference)
        query.with_max_width(args.max_width)
        if args.max_height is not None:
            query.with_max_height(args.max_height)
        await query.execute()
        with open(args.output, 'wb') as f:
            f.write(query.get_photo())
        if not args.quiet:
            print(f"Saved {len(query.get_photo())} bytes ({query.content_type}) to {args.output}")
        return 0


def main(argv=None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.command == "serve":
        from .server import run_server
        run_server(host=args.host, port=args.port)
        return 0

    try:
        return asyncio.run(_run(args))
    except GooglePlacesError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
