""" urbit_keygen build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import urbit_keygen

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=urbit_keygen.name,
    version=urbit_keygen.__version__,
    license=urbit_keygen.__license__,
    author=urbit_keygen.__author__,
    author_email=urbit_keygen.__author_email__,
    description="Deterministic key derivation and 2-of-3 seed sharding for Urbit wallets",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "btclib>=2022.5.3,<2023",
        "dataclasses-json>=0.5.7",
        "PyNaCl>=1.5.0",
        "argon2-cffi>=21.3.0",
    ],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "urbit hd-wallet bip32 ed25519 argon2 key-derivation "
        "secret-sharing seed-backup"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
