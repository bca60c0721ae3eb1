import sys

from kumitate.cli import main


if __name__ == "__main__":
    sys.exit(main())

# Usage:
# uv run main.py "ul.list>li.item{one}+li.item{two}" --prefix styles
