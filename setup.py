import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='userstore',
    version='1.0.0',
    license='MIT',
    description='A user repository with interchangeable in-memory and key-value backends.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.10',
    install_requires=[
        'attrs',
        'marshmallow>=3.13',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'faker',
        ]
    },
)
