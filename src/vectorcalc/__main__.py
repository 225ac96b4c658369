"""Run with: python -m vectorcalc"""
import sys

from vectorcalc.main import main

if __name__ == "__main__":
    sys.exit(main())
