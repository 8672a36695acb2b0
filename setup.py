# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="permcheck",
    version="0.1.0",
    description="Render a directory tree with the read/write/traverse rights of a given user",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["permcheck", "permcheck.*"]),
    install_requires=[
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        'console_scripts': [
            'permcheck=permcheck.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: POSIX",
        "Environment :: Console",
    ],
)
