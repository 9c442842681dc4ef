# setup.py
from setuptools import setup, find_packages

setup(
    name="sprig",
    version="0.1.0",
    description="An embeddable S-expression language: reader, tree-walking evaluator and builtins",
    packages=find_packages(include=["sprig", "sprig.*"]),
    python_requires=">=3.11",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sprig = sprig.console:main"],
    },
    zip_safe=False,
)
