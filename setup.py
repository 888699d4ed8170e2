#!/usr/bin/env python3
# Copyright (C) 2026-- The fastadbg Development Team
#
# This file is part of fastadbg.
#
# fastadbg is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# fastadbg is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with fastadbg.  If not, see <http://www.gnu.org/licenses/>.

import os
from setuptools import find_packages, setup

classes = """
    Development Status :: 3 - Alpha
    License :: OSI Approved :: GNU General Public License v3 (GPLv3)
    Topic :: Scientific/Engineering
    Topic :: Scientific/Engineering :: Bio-Informatics
    Programming Language :: Python :: 3 :: Only
    Operating System :: Unix
    Operating System :: POSIX
    Operating System :: MacOS :: MacOS X
"""
classifiers = [s.strip() for s in classes.split("\n") if s]

description = "Builds de Bruijn graphs of k-mers from FASTA files"

long_description = (
    "fastadbg converts nucleotide FASTA records into de Bruijn graphs of "
    "k-mers (with multiplicities), either as one merged graph or as one graph "
    "per record, and writes them out for downstream assembly stages."
)

# We can't just import __version__ from fastadbg, because its modules import
# packages that probably haven't been installed yet at this point in setup.
__version__ = None
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, "fastadbg", "__init__.py"), "r") as fp:
    for line in fp.readlines():
        if line.startswith('__version__ = "'):
            __version__ = line.split('"')[1]
if __version__ is None:
    raise RuntimeError("Couldn't find version string?")

setup(
    name="fastadbg",
    version=__version__,
    license="GPL3",
    description=description,
    long_description=long_description,
    author="fastadbg Development Team",
    classifiers=classifiers,
    packages=find_packages(),
    install_requires=[
        "click",
        "networkx",
        "biopython",
    ],
    extras_require={
        "dev": ["pytest", "pytest-cov", "flake8", "black>=22.1.0"]
    },
    entry_points={"console_scripts": ["fastadbg=fastadbg._cli:run_script"]},
    python_requires=">=3.8",
)
