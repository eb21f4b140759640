# setup.py
from setuptools import setup, find_packages

setup(
    name='reconui',
    version='0.1.0',
    description='A server-side widget toolkit: stateful component trees rendered to HTML, with event dispatch and partial re-rendering.',
    long_description=open('README.md', encoding='utf-8').read(),
    long_description_content_type='text/markdown',

    # Finds `reconui` and `reconui_cli`
    packages=find_packages(exclude=['tests', 'tests.*']),

    # These are the dependencies the toolkit needs to run.
    install_requires=[
        'PyYAML',
        'typer',
    ],
    extras_require={
        'test': ['pytest'],
    },

    # Creates an executable script named `reconui` that calls the `app`
    # object inside `reconui_cli.main`.
    entry_points={
        'console_scripts': [
            'reconui = reconui_cli.main:app',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: User Interfaces',
    ],
    python_requires='>=3.10',
)
