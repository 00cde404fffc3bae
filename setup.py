# setup.py
from setuptools import setup, find_packages

setup(
    name="scheval",
    version="0.1.0",
    description="Eager and lazy (call-by-need) evaluator for a small Scheme",
    packages=find_packages(include=["scheval", "scheval.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["scheval=scheval.repl:main"],
    },
    zip_safe=False,
)
