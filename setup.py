# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="theta",
    version="0.3.0",
    description="Type checker and evaluator for a simply-typed lambda calculus with records, variants and fix",
    packages=find_namespace_packages(include=["theta", "theta.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
