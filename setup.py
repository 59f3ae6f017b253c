import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("biginteger/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="biginteger",
    version=version,
    description="Arbitrary precision signed integers. Text in any radix 2 to 36. Truncating division, floored modulo.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "License :: Public Domain",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
            # bignum
            # arbitrary precision
            # radix conversion
    ],
)
