from setuptools import setup, find_packages

"""
pyLocalMin: reverse communication Brent minimization of a scalar function on
an interval, for objectives that are measured rather than computed.
"""

setup(
    name = "pyLocalMin",
    version = "0.1.0",
    description = "Reverse communication Brent minimizer for scalar functions",
    packages = find_packages(include=["pyLocalMin", "pyLocalMin.*"]),
    python_requires = ">=3.10",
    install_requires = [
        "numpy",
    ],
    extras_require = {
        "test": ["pytest"],
    },
)
