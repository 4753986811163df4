#!/usr/bin/env python3

from setuptools import find_packages, setup

version = {}
with open("./advisory_conflicts/_version.py") as f:
    exec(f.read(), version)

with open("./README.md") as f:
    long_description = f.read()

setup(
    name="advisory-conflicts",
    version=version["__version__"],
    license="Apache-2.0",
    description="Reduce security advisory version ranges to minimal per-package conflict constraints",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["test", "test.*"]),
    platforms="any",
    python_requires=">=3.8",
    install_requires=[
        "icontract>=2.6.0",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
            "pretend",
            "hypothesis",
            "coverage[toml]",
        ],
        "dev": [
            "bump >= 1.3.1",
            "flake8",
            "black",
            "isort",
            "pytest",
            "pytest-cov",
            "pretend",
            "hypothesis",
            "coverage[toml]",
            "interrogate",
            "pdoc3",
            "mypy",
        ],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: Apache Software License",
        "Intended Audience :: Developers",
        "Topic :: Security",
    ],
)
