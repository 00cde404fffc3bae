import sys

from scheval.repl import main

if __name__ == "__main__":
    sys.exit(main())
