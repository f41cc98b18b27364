from setuptools import setup, find_packages


setup(
    name="stablezip",
    version="0.1",
    packages=find_packages(include=["stablezip", "stablezip.*"]),
    description="Reproducible zip archives from bytes, files, directory trees and in-memory file sets.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
    ],
)
