from setuptools import find_packages, setup

setup(
    name="seckey",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "pydantic",
        "cryptography",
        "click",
        "base58",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "seckey=seckey.cli:cli",
        ],
    },
)
