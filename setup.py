# setup.py
from setuptools import setup, find_packages

setup(
    name="spatialkit",
    version="1.0.0",
    description="Spatial math kernel: vectors, 3x3/4x4 matrices and quaternions",
    packages=find_packages(include=["spatialkit", "spatialkit.*"]),
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
