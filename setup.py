"""
mqttoptions - connection options and reconnect policy for MQTT 3.1.1 clients

Setup script for installation via pip
"""

from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name='mqttoptions',
    version='1.0.0',
    author='mateuszsury',
    description='Connection options, TLS and reconnect policy model for MQTT 3.1.1 clients',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=('tests', 'tests.*', 'examples')),
    python_requires='>=3.7',
    install_requires=[
        # No dependencies: TLS uses the standard library ssl module
    ],
    extras_require={
        'dev': [
            'pytest>=6.0',
            'ruff>=0.1.0',
        ],
    },
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Topic :: System :: Networking',
        'Topic :: Communications',
        'License :: OSI Approved :: Apache Software License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: Implementation :: CPython',
        'Operating System :: OS Independent',
    ],
    keywords='mqtt client options reconnect tls iot',
    license='Apache-2.0',
    platforms='any',
)
