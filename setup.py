# Usage: python setup.py bdist_wheel

import setuptools  # type: ignore

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name='proptree',
    version='0.1',
    description="Expression trees, truth tables, and CNF for propositional formulas",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(
        exclude=['tests', 'tests.*']
    ),
    python_requires='>=3.11',
    install_requires=[
        'sympy',
        'typing_extensions'
    ],
    extras_require={
        'test': ['pytest'],
        'doc': ['sphinx', 'sphinx_book_theme'],
    },
    entry_points={
        'console_scripts': ['proptree = proptree.__main__:main'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: BSD-2-Clause",
        "Operating System :: OS Independent",
    ],
)
