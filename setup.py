# setup.py
from setuptools import setup, find_packages

setup(
    name="sanguinius",
    version="0.13",
    description="A small Scheme interpreter with a tail-call trampolined evaluator",
    packages=find_packages(include=["sanguinius", "sanguinius.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["sanguinius=sanguinius.__main__:main"],
    },
    zip_safe=False,
)
