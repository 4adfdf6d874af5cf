# setup.py
from setuptools import setup, find_packages

setup(
    name="simplysp",
    version="0.0.0.0.1",
    description="A tiny prefix-notation arithmetic calculator with a Lisp-like surface syntax",
    packages=find_packages(include=["simplysp", "simplysp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "lark>=1.1",
        "prompt_toolkit>=3.0",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["simplysp = simplysp.__main__:main"],
    },
    zip_safe=False,
)
