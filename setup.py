# setup.py
from setuptools import setup, find_packages

setup(
    name="parkeddomains",
    version="0.1.0",
    description="Concurrent checker that flags parked-domain placeholder pages",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "pydantic>=2.0",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
            "cryptography>=41",
        ],
    },
    entry_points={
        "console_scripts": [
            "parkeddomains=parked_domains.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
