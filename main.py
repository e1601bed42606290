#!/usr/bin/env python3
"""
Arknights operator catalog builder main script.

Usage:
    python main.py                              # Build data/operators.json
    python main.py --output out/catalog.json    # Custom output path
    python main.py --force                      # Overwrite existing output
    python main.py --quiet                      # No progress bar
"""

import argparse
import sys
from datetime import datetime

from operator_catalog.catalog_builder import build_catalog, count_by_profession
from operator_catalog.constants import REQUEST_TIMEOUT
from operator_catalog.game_data_fetcher import GameDataFetcher
from operator_catalog.io_utils import file_exists, save_to_json


def fetch_game_data(timeout: float) -> tuple:
    """Download character and uniequip tables"""
    print("=" * 60)
    print("Step 1: Fetch game data")
    print("=" * 60)

    with GameDataFetcher(timeout=timeout) as fetcher:
        char_table, uniequip_table = fetcher.fetch_tables()

    print(f"Character records: {len(char_table)}")
    print(f"Sub-professions: {len(uniequip_table['subProfDict'])}")

    return char_table, uniequip_table


def generate_report(catalog: dict):
    """Print catalog summary"""
    print("\n" + "=" * 60)
    print("Catalog Report")
    print("=" * 60)

    print(f"Professions: {len(catalog['professions'])}")
    print(f"Operators: {len(catalog['operators'])}")

    names = {prof['id']: prof['name'] for prof in catalog['professions']}
    counts = count_by_profession(catalog)

    print("\nOperators by profession:")
    for prof_id, count in sorted(counts.items(), key=lambda x: -x[1]):
        print(f"  - {names.get(prof_id, prof_id)}: {count}")


def main():
    parser = argparse.ArgumentParser(
        description='Arknights operator catalog builder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                         # Build data/operators.json
    python main.py --output catalog.json   # Custom output path
    python main.py --force                 # Rebuild even if output exists
    python main.py --timeout 60            # 60 sec request timeout
        """
    )

    parser.add_argument('--output', default='data/operators.json',
                        help='Output JSON path (default: data/operators.json)')
    parser.add_argument('--indent', type=int, default=2,
                        help='JSON indent (default: 2)')
    parser.add_argument('--timeout', type=float, default=REQUEST_TIMEOUT,
                        help=f'Request timeout in seconds (default: {REQUEST_TIMEOUT})')
    parser.add_argument('--force', action='store_true',
                        help='Overwrite existing output')
    parser.add_argument('--quiet', action='store_true',
                        help='Hide progress bar')

    args = parser.parse_args()

    if file_exists(args.output) and not args.force:
        print(f"{args.output} already exists. Use --force to rebuild.")
        return

    print("=" * 60)
    print("Arknights operator catalog builder")
    print(f"Start: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print("=" * 60)

    try:
        char_table, uniequip_table = fetch_game_data(args.timeout)

        print("\n" + "=" * 60)
        print("Step 2: Build catalog")
        print("=" * 60)

        catalog = build_catalog(char_table, uniequip_table['subProfDict'],
                                progress=not args.quiet)
        save_to_json(catalog, args.output, indent=args.indent)
        print(f"Catalog saved: {args.output}")

        generate_report(catalog)

        print("\n" + "=" * 60)
        print("Build complete!")
        print(f"End: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
        print("=" * 60)

    except KeyboardInterrupt:
        print("\n\nBuild interrupted by user.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
