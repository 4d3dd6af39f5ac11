import codecs
import os
from typing import Text

from setuptools import find_packages, setup


def parse_requirements(req_file_path: Text):
    with open(req_file_path, "r") as req_file:
        return [line.strip() for line in req_file if line.strip()]


rf = codecs.open(os.path.join(os.path.dirname(__file__), "README.txt"), "r")
with rf as readme:
    README = readme.read()

requirements = parse_requirements(
    os.path.join(os.path.dirname(__file__), "requirements_as_lib.txt"),
)

os.chdir(os.path.normpath(os.path.join(os.path.abspath(__file__), os.pardir)))

setup(
    name="horae",
    version="0.1.0",
    packages=find_packages("src"),
    package_dir={
        "": "src",
    },
    scripts=["bin/horae"],
    include_package_data=True,
    license="AGPLv3+",
    description="Locale and timezone aware formatting of instants",
    long_description=README,
    install_requires=requirements,
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.9",
    classifiers=[
        "License :: OSI Approved :: GNU Affero General Public License v3 or "
        "later (AGPLv3+)",
        "Development Status :: 4 - Beta",
    ],
)
