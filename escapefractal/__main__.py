"""
Allow running the package directly: python -m escapefractal [terminal|julia|mandelbrot]
"""
import sys

from .cli import main

sys.exit(main())
