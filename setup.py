from setuptools import setup, find_packages

setup (
    name = "tonality",
    version = "0.0.1",
    description = "Lilypond-style pitch notation, interval arithmetic, keys, scales and chords.",
    long_description = open ( 'README.md' ).read ( ),
    long_description_content_type = "text/markdown",
    package_dir = { "": "src" },
    packages = find_packages ( "src" ),
    install_requires = [
        "numpy",
        "pyrsistent",
        "bidict",
        "sortedcontainers",
    ],
    extras_require = {
        "music21": [ "music21" ],
    },
    entry_points = {
        "console_scripts": [ "tonality = tonality.__main__:main" ],
    },
    classifiers = [
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
    ],
    python_requires = ">=3.12",
)
