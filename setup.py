# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sprout",
    version="0.1.0",
    description="A small Lisp that grows each form into Python and runs it before compiling the next",
    packages=find_namespace_packages(include=["sprout", "sprout.*"]),
    package_data={"sprout": ["prelude/std/*.lisp"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["sprout=sprout.__main__:main"],
    },
    zip_safe=False,
)
