import sys

from unified_ai_platform.cli import main

if __name__ == "__main__":
    sys.exit(main())
