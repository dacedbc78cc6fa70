# setup.py
from setuptools import setup, find_packages

setup(
    name="minimal_esn",
    version="0.1.0",
    description="Minimal Echo State Network with a ridge-regression readout and Gauss-Jordan inversion",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        'numpy>=1.21.0',
        'scipy>=1.7.0',
        'matplotlib>=3.4.0',
        'pyyaml>=5.4'
    ],
    extras_require={
        'test': ['pytest>=7.0']
    },
    python_requires='>=3.8',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
