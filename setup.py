# setup.py
from setuptools import setup, find_packages

setup(
    name="angie",
    version="0.1.0",
    description="angie – 3D vector math for graphics and geometry code",
    packages=find_packages(include=["angie", "angie.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
