"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line interface straight from a source checkout.

It modifies 'sys.path' so that 'from integralanalysis...' imports resolve
without installing the package.

Usage:
    $ python run.py quadratic_peak --levels 10
"""
import os
import sys

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from integralanalysis.main import main

if __name__ == "__main__":
    sys.exit(main())
