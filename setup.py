#!/usr/bin/env python

""" inxpress_rates setup """

from setuptools import setup, find_packages

setup(
    name="inxpress_rates",
    version='1.0.0',
    description="InXpress live shipping rates",
    long_description="Uses the InXpress API to get live shipping rates based on product weight and dimensions",
    author="NewStore Inc.",
    author_email='dev@newstore.com',
    url='https://github.com/NewStore/newstore-integrations/integrations/inxpress_rates',
    packages=find_packages('src'),
    package_dir={'': 'src'},
    python_requires='>=3.8',
    install_requires=[
        'setuptools',
        'requests>=2.11.1',
        'dacite>=1.6',
        'boto3',
        'flask>=2.2',
    ],
    extras_require={
        'test': [
            'pytest',
            'requests-mock',
            'moto>=5',
        ],
    },
    test_suite="tests",
    tests_require=[
        'pytest',
        'requests-mock',
        'moto>=5',
    ],
)
