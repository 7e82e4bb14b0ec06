import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "aoc_helper", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="advent-of-code-helper",
    version=version,
    description="Test and run your Advent of Code solvers against cached puzzle inputs",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["aoc_helper"],
    entry_points={
        "console_scripts": [
            "aoc-helper=aoc_helper.cli:main",
        ],
    },
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.9",
    install_requires=[
        "urllib3>=2,<2.5",
        "termcolor>=2.1",
        'colorama>=0.4.6; platform_system == "Windows"',
        'tomli; python_version < "3.11"',
        'typing_extensions; python_version < "3.11"',
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-raisin",
            "pytest-freezer",
            "pook",
        ],
    },
)
