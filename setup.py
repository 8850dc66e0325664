"""Setup script for ugraph.

ugraph is pure Python on top of NumPy and SciPy; there are no extensions to
compile.

Usage:
    # Install package
    pip install -e .

    # Install with test dependencies
    pip install -e ".[test]"
"""

from setuptools import find_packages, setup

# =============================================================================
# Dependencies
# =============================================================================

INSTALL_REQUIRES = [
    "numpy>=1.21",
    "scipy>=1.7",
    "typing_extensions>=4.0",
]

EXTRAS_REQUIRE = {
    "test": [
        "pytest>=7.0",
    ],
    # Colored console logging on Windows
    "color": [
        "colorama>=0.4",
    ],
}

# =============================================================================
# Main Setup
# =============================================================================

if __name__ == "__main__":
    setup(
        name="ugraph",
        version="1.0.0",
        description="In-memory undirected graph with matrix and adjacency-list storage",
        python_requires=">=3.10",
        packages=find_packages(include=["ugraph", "ugraph.*"]),
        install_requires=INSTALL_REQUIRES,
        extras_require=EXTRAS_REQUIRE,
    )
