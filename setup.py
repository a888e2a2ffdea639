#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()
with open('HISTORY.rst', encoding='utf8') as history_file:
    history = history_file.read()


setup(
    name='whackerlink-reporter',
    version='1.0.0',
    description="Fire-and-forget HTTP reporting of radio-network events.",
    long_description=readme + '\n\n' + history,
    long_description_content_type="text/markdown",
    packages=[
        'whackerlink_reporter',
        'whackerlink_reporter.config',
    ],
    package_dir={'whackerlink_reporter': 'whackerlink_reporter'},
    entry_points={
        'console_scripts': [
            'whackerlink-reporter=whackerlink_reporter.cli:cli'
        ]
    },
    include_package_data=True,
    install_requires=[
        'Click>=8.0',
        'httpx>=0.24',
        'pydantic>=2.0',
        'tzdata',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    python_requires=">=3.9",
    license="MIT license",
    zip_safe=False,
    keywords='whackerlink reporter telemetry',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
