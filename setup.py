# -*- coding: utf-8 -*-
import os
import re

from setuptools import find_packages, setup

with open("guesser/__init__.py") as f:
    version = re.search(r'__version__ = "(.*?)"', f.read()).group(1)


def read(fname):
    try:
        with open(os.path.join(os.path.dirname(__file__), fname), "r") as fp:
            return fp.read().strip()
    except IOError:
        return ""


setup(
    name="guesser",
    version=version,
    license="Apache 2.0",
    description="Guess the secret number between 1 and 100",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    keywords=["game", "guessing"],
    classifiers=[],
    zip_safe=False,
    install_requires=[
        "click==8.1.6",
        "fire==0.5.0",
    ],
    extras_require={"test": ["pytest"]},
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    entry_points={"console_scripts": ["guess = guesser.__main__:main"]},
)
