"""Package setup for tinkoff_mobile."""

from setuptools import setup, find_packages

setup(
    name="tinkoff-mobile",
    version="0.1.0",
    description="Client for the Tinkoff Mobile (MVNO) web API",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "requests>=2.31.0",
        "colorlog>=6.8.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
)
