#!/usr/bin/env python3
from setuptools import setup, find_packages


setup(
    name='gibberish-detector',
    version='2.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'gibberish': ['data/*.json']
    },
    install_requires=[
        'regex>=2023.8.8',
        'pydantic>=2.0',
        'pydantic-settings>=2.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0'
        ]
    },
    python_requires='>=3.8',
    include_package_data=True,
    author='Dennis Carlson',
    author_email='dcarlson@gotham-security.com',
    description='A trainable, cacheable character-transition model for detecting gibberish text',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3'
    ],
)
