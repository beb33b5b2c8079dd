# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
    name='hearts-ai',
    version='0.1',
    packages=find_packages(include=['heartsai', 'heartsai.*']),
    url='',
    license='',
    author='',
    author_email='',
    description='Decision core for computer-controlled Hearts players',
    install_requires=['pyyaml'],
    extras_require={
        'test': ['pytest']
    },
    entry_points={
        'console_scripts': [
            'deal = heartsai.deal:main',
            'game = heartsai.game:main',
            'strategy = heartsai.strategy.__main__:main'
        ],
    }
)
