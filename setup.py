
from setuptools import setup, find_packages
setup(
    name="perfect_hash_store",
    version="0.1.0",
    description="Mutable maps and sets over caller-supplied perfect hash functions",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy>=1.17"],
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
)
