from setuptools import setup, find_packages
from codecs import open
from os import path

here = path.abspath(path.dirname(__file__))

# Get the long description from the README file
with open(path.join(here, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='pycloseeval',
    version='0.0.1',
    description='Close evaluation of Cauchy integrals on smooth closed curves in 2D',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='pycloseeval developers',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
    ],
    packages=find_packages(exclude=['tests', 'examples']),
    install_requires=[
        'numpy',
        'scipy',
        'numexpr',
        'numba',
        'matplotlib',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
