#!/usr/bin/env python

from setuptools import setup


# Modified from http://stackoverflow.com/questions/2058802/
# how-can-i-get-the-version-defined-in-setup-py-setuptools-in-my-package
def version():
    import os
    import re

    init = os.path.join("biotool", "__init__.py")
    with open(init) as fp:
        initData = fp.read()
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", initData, re.M)
    if match:
        return match.group(1)
    else:
        raise RuntimeError("Unable to find version string in %r." % init)


setup(
    name="biotool",
    version=version(),
    packages=["biotool"],
    keywords=["FASTA", "bioinformatics"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
    ],
    license="MIT",
    description="Compute simple statistics for the sequences in FASTA files",
    python_requires=">=3.9",
    scripts=["bin/fasta-stats.py"],
    entry_points={
        "console_scripts": [
            "biotool = biotool.cli:main",
        ],
    },
    extras_require={
        "test": [
            "biopython>=1.71",
            "pytest",
        ],
    },
)
