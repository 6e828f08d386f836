from setuptools import setup, find_packages

setup(
    name='force-layout',
    version='1.0.0',
    description='Force-directed layout engine for undirected weighted graphs',
    packages=find_packages(exclude=['tests', 'tests.*']),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
)
