#!/usr/bin/env python
"""nts lives at <https://github.com/nts-svn/nts>."""
from setuptools import find_packages, setup

about = {}
with open("src/nts/__about__.py") as fp:
    exec(fp.read(), about)

with open("requirements/base.txt") as f:
    install_reqs = [line for line in f.read().split("\n") if line]

with open("requirements/test.txt") as f:
    tests_reqs = [line for line in f.read().split("\n") if line]

readme = open("README.rst").read()
history = open("CHANGES").read().replace(".. :changelog:", "")


setup(
    name=about["__title__"],
    version=about["__version__"],
    url=about["__github__"],
    project_urls={
        "Documentation": about["__docs__"],
        "Code": about["__github__"],
        "Issue tracker": about["__tracker__"],
    },
    license=about["__license__"],
    author=about["__author__"],
    author_email=about["__email__"],
    description=about["__description__"],
    long_description=readme + "\n\n" + history,
    long_description_content_type="text/x-rst",
    include_package_data=True,
    install_requires=install_reqs,
    extras_require={"test": tests_reqs},
    python_requires=">=3.9",
    zip_safe=False,
    keywords=about["__title__"],
    package_dir={"": "src"},
    packages=find_packages("src"),
    entry_points=dict(console_scripts=["nts=nts.cli:cli"]),
    classifiers=[
        "Development Status :: 4 - Beta",
        "License :: OSI Approved :: MIT License",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Operating System :: POSIX",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Utilities",
        "Topic :: Software Development :: Version Control",
    ],
)
