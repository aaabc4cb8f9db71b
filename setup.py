#!/usr/bin/env python3
"""
Lookup Tables: interpolating lookup tables of any dimension
"""

import sys
from pathlib import Path
from setuptools import setup, find_packages

# Ensure we're using the right Python version
if sys.version_info < (3, 8):
    sys.exit("Python 3.8 or higher is required")

# Read the README file
def read_readme():
    """Read README.md for long description"""
    readme_path = Path(__file__).parent / "README.md"
    if readme_path.exists():
        with open(readme_path, "r", encoding="utf-8") as f:
            return f.read()
    return "Lookup Tables: interpolating lookup tables of any dimension"

# Core dependencies
INSTALL_REQUIRES = [
    "numpy>=1.21.0",
    "matplotlib>=3.4.0",
    "scipy>=1.7.0",
]

# Optional dependencies
EXTRAS_REQUIRE = {
    "test": [
        "pytest>=6.2.0",
        "pytest-cov>=2.12.0",
    ],
    "dev": [
        "black>=21.6.0",
        "isort>=5.9.0",
        "flake8>=3.9.0",
        "mypy>=0.910",
    ],
}

# Add 'full' option that includes everything
EXTRAS_REQUIRE["full"] = list(set(
    dep for deps in EXTRAS_REQUIRE.values() for dep in deps
))

# Classifiers for PyPI
CLASSIFIERS = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3.8",
    "Programming Language :: Python :: 3.9",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules"
]

def get_version():
    """Get version from package"""
    init_file = Path(__file__).parent / "lookup_tables" / "__init__.py"
    if init_file.exists():
        with open(init_file, "r") as f:
            for line in f:
                if line.startswith("__version__"):
                    return line.split("=")[1].strip().strip('"').strip("'")

    # Default version
    return "1.0.0"

def main():
    """Main setup function"""
    setup(
        name="lookup-tables",
        version=get_version(),
        description="Multidimensional lookup tables with linear, Lagrange, cubic spline and Catmull-Rom interpolation",
        long_description=read_readme(),
        long_description_content_type="text/markdown",
        packages=find_packages(exclude=["tests*", "docs*", "examples*"]),
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
        python_requires=">=3.8",
        classifiers=CLASSIFIERS,
        keywords=[
            "interpolation",
            "lookup-table",
            "splines",
            "lagrange",
            "catmull-rom",
            "extrapolation"
        ],
        license="MIT",
        zip_safe=False,
        platforms=["any"],
    )

if __name__ == "__main__":
    main()
