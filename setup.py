# setup.py
from setuptools import setup, find_packages

setup(
    name="minilisp",
    version="0.1.0",
    description="A tree-walking interpreter for a minimal Lisp",
    python_requires=">=3.10",
    packages=find_packages(include=["minilisp", "minilisp.*"]),
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["minilisp=minilisp.__main__:main"],
    },
    zip_safe=False,
)
