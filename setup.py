import os

from setuptools import setup

# mypyc compilation is opt-in: QUADINT_USE_MYPYC=1 pip install .
ext_modules = []
if os.environ.get("QUADINT_USE_MYPYC") == "1":
    from mypyc.build import mypycify

    ext_modules = mypycify([
        "quadint/utils.py",
        "quadint/ring.py",
        "quadint/exceptions.py",
        "quadint/quad.py",
    ])

setup(
    name="quadint",
    version="0.1.0",
    description="Exact arithmetic on algebraic integers of quadratic fields",

    packages=["quadint"],
    ext_modules=ext_modules,

    python_requires=">=3.9",
    install_requires=[
        "sympy",
        "mypy_extensions",
    ],
    extras_require={
        "test": ["pytest"],
        "mypyc": ["mypy"],
    },

    license="MIT",
)
