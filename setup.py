#!python

import os.path

from setuptools import find_packages, setup

# Read the version without importing the package, which needs its
# dependencies installed
about = {}
with open(os.path.join("src", "rfc1924", "version.py")) as f:
    exec(f.read(), about)


if __name__ == "__main__":
    setup(
        name="rfc1924",
        version=about["versionstring"](),
        package_dir={"": "src"},
        packages=find_packages("src"),
        description="Pure-Python RFC 1924 base85 encoding and decoding.",
        long_description=open("README.md").read(),
        long_description_content_type="text/markdown",
        license="Two-clause BSD license",
        keywords="base85 rfc1924 encoding codec",
        zip_safe=True,
        python_requires=">=3.8",
        install_requires=[
            "cached-property==1.5.2",
            "loguru==0.7.2",
        ],
        extras_require={
            "test": [
                "pytest==8.3.2",
            ],
        },
        classifiers=[
            "Programming Language :: Python :: 3",
            "Development Status :: 5 - Production/Stable",
            "Intended Audience :: Developers",
            "License :: OSI Approved :: BSD License",
            "Natural Language :: English",
            "Operating System :: OS Independent",
            "Programming Language :: Python :: 3.8",
            "Programming Language :: Python :: 3.9",
            "Programming Language :: Python :: 3.10",
            "Programming Language :: Python :: 3.11",
            "Programming Language :: Python :: 3.12",
            "Topic :: Software Development :: Libraries :: Python Modules",
        ],
    )
