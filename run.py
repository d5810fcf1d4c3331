"""
Entry Point Script (Bootstrap)
==============================
Runs the analysis from a source checkout without installing the package.

It adds the 'src' directory to 'sys.path' so that imports like
'from electrontemperature.analysis...' resolve.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from electrontemperature.main import main

if __name__ == "__main__":
    main()
