# setup.py
from setuptools import setup, find_packages

setup(
    name="ssli",
    version="0.3.0",
    description="A small Lisp-family scripting language with lexical closures",
    packages=find_packages(include=["ssli", "ssli.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["ssli=ssli.cli:entry_point"],
    },
    zip_safe=False,
)
