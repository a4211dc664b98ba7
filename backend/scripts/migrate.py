#!/usr/bin/env python3
"""Apply (or roll back to) an Alembic revision from the backend directory."""
import argparse
import subprocess
import sys
from pathlib import Path

BACKEND_DIR = Path(__file__).resolve().parent.parent

def run_migrations(revision: str = "head", downgrade: bool = False):
    command = ["alembic", "downgrade" if downgrade else "upgrade", revision]
    try:
        print(f"Running: {' '.join(command)}")
        subprocess.run(command, check=True, cwd=BACKEND_DIR)
        print("Migrations completed successfully!")
    except subprocess.CalledProcessError as e:
        print(f"Migration failed: {e}")
        sys.exit(1)
    except FileNotFoundError:
        print("Alembic not found. Make sure it's installed.")
        sys.exit(1)

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("revision", nargs="?", default="head")
    parser.add_argument("--downgrade", action="store_true", help="downgrade to REVISION instead of upgrading")
    args = parser.parse_args()
    run_migrations(args.revision, downgrade=args.downgrade)
