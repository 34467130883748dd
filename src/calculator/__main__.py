import sys

from src.calculator.cli import main

sys.exit(main())
