#!/usr/bin/env python

# Todo list to prepare a release:
#  - run: pytest tests
#  - edit shapemock/version.py: check/set version
#  - edit ChangeLog: set release date
#  - git tag shapemock-x.y
#  - python -m build && twine upload dist/*
#
# After the release:
#  - edit shapemock/version.py: set version to n+1
#  - edit ChangeLog: add a new empty section for version n+1

from importlib.util import module_from_spec, spec_from_file_location
from os import path

from setuptools import setup

CLASSIFIERS = [
    'Intended Audience :: Developers',
    'Development Status :: 4 - Beta',
    'License :: OSI Approved :: GNU General Public License (GPL)',
    'Operating System :: OS Independent',
    'Natural Language :: English',
    'Programming Language :: Python',
    'Programming Language :: Python :: 3',
    'Topic :: Software Development :: Testing :: Mocking',
]

MODULES = (
    "shapemock",
)


def load_version():
    spec = spec_from_file_location("version", path.join("shapemock", "version.py"))
    version = module_from_spec(spec)
    spec.loader.exec_module(version)
    return version


def main():
    shapemock = load_version()
    PACKAGES = {}
    for name in MODULES:
        PACKAGES[name] = name.replace(".", "/")

    with open('README.rst') as fp:
        long_description = fp.read()
    with open('ChangeLog') as fp:
        long_description += fp.read()

    install_options = {
        "name": shapemock.PACKAGE,
        "version": shapemock.VERSION,
        "description": "Instrumented test doubles built from object shapes",
        "long_description": long_description,
        "long_description_content_type": "text/x-rst",
        "classifiers": CLASSIFIERS,
        "license": shapemock.LICENSE,
        "packages": list(PACKAGES.keys()),
        "package_dir": PACKAGES,
        "python_requires": ">=3.10",
        "install_requires": [],
        "extras_require": {"test": ["pytest"]},
    }

    setup(**install_options)

if __name__ == "__main__":
    main()
