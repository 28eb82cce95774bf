""" deposit_address build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import deposit_address

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name="deposit-address",
    version=deposit_address.__version__,
    license=deposit_address.__license__,
    author=deposit_address.__author__,
    author_email=deposit_address.__author_email__,
    description="Deterministic segwit deposit addresses from a master public key",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.2.3,<2024"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "bitcoin cryptography elliptic-curves secp256k1 tagged-hash "
        "segwit bech32 deposit-address key-tweak"
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
