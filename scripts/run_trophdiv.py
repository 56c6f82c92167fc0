"""
Compute trophic diversity indices:
1. Load abundances and trophic levels from CSV (or generate example data)
2. Compute the ten indices per community
3. Optionally write the result table to CSV and/or store it in the database
"""

import argparse
import logging
import sys

import pandas as pd

from trophdiv.config import TrophDivConfig
from trophdiv.indices import TrophDivError, TrophicDiversityService
from trophdiv.io import generate_example, load_abundance_table, load_trophic_levels

logger = logging.getLogger("run_trophdiv")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compute trophic diversity indices")
    parser.add_argument("--abundances", help="CSV of abundances (communities x species)")
    parser.add_argument("--trophic-levels", help="CSV of species, trophic level")
    parser.add_argument("--example", action="store_true", help="Use random example data")
    parser.add_argument("--seed", type=int, help="Seed for example data")
    parser.add_argument("--output", help="Write the result table to this CSV")
    parser.add_argument("--save", metavar="NAME", help="Store the run in the database")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    if not args.example and not (args.abundances and args.trophic_levels):
        parser.error("either --example or both --abundances and --trophic-levels are required")
    return args


def save_run(name: str, results: pd.DataFrame, n_species: int) -> None:
    from trophdiv.db.session import SessionLocal, init_db
    from trophdiv.db.repositories import ResultRepository

    init_db()
    session = SessionLocal()
    try:
        run = ResultRepository(session).save_results(name, results, n_species)
        print(f"Stored run '{run.name}' with id {run.run_id}")
    finally:
        session.close()


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.example:
            ab, tl = generate_example(seed=args.seed)
            print("Abundances:")
            print(ab)
            print("\nTrophic levels:")
            print(tl)
        else:
            ab = load_abundance_table(args.abundances)
            tl = load_trophic_levels(args.trophic_levels)

        service = TrophicDiversityService(TrophDivConfig(show_progress=args.progress))
        results, report = service.compute_with_report(ab, tl)
    except TrophDivError as e:
        logger.error(str(e))
        return 1

    print("\nTrophic diversity indices:")
    print(results.to_string())
    for failure in report.failures:
        print(f"  ! {failure.community} (row {failure.position}): {failure.reason}")

    if args.output:
        results.to_csv(args.output, index_label="community")
        print(f"\nWrote {args.output}")

    if args.save:
        save_run(args.save, results, n_species=ab.shape[1])

    return 0


if __name__ == "__main__":
    sys.exit(main())
