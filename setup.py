from setuptools import setup, find_packages
import os
import re
from pathlib import Path


def read_version():
    init_path = Path(__file__).parent / "segdist" / "__init__.py"
    src = init_path.read_text(encoding="utf-8")
    match = re.search(r'^__version__\s*=\s*[\'"]([^\'"]+)[\'"]', src, re.M)
    if match:
        return match.group(1)
    raise RuntimeError("Cannot find __version__ in __init__.py")

VERSION = read_version()

with open("README.md", "r", encoding="utf-8") as file:
    DESCRIPTION = file.read()

CLASSIFIERS = ['Intended Audience :: Science/Research',
               'Intended Audience :: Developers',
               'License :: OSI Approved :: MIT License',
               'Programming Language :: Python :: 3.9',
               'Programming Language :: Python :: 3.10',
               'Programming Language :: Python :: 3.11',
               'Programming Language :: Python :: 3.12',
               'Topic :: Scientific/Engineering :: Mathematics',
               'Operating System :: OS Independent']

PACKAGES = find_packages(include=['segdist', 'segdist.*'])


def parse_requirements(path="requirements.txt"):
    """Return a list of requirements from the given file."""
    reqs = []
    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as req_file:
            for line in req_file:
                # Strip comments and whitespace
                line = line.split("#", 1)[0].strip()
                if line:
                    reqs.append(line)
    return reqs


REQUIREMENTS = parse_requirements()
TEST_REQUIREMENTS = parse_requirements("requirements-test.txt")

KEYWORDS = ["geometry",
            "distance",
            "closest-point",
            "line-segment",
            "computational-geometry"]

setup_info = dict(
    name='segdist',
    version=VERSION,
    author='segdist contributors',
    license='MIT',
    python_requires='>=3.9',
    classifiers=CLASSIFIERS,
    packages=PACKAGES,
    keywords=KEYWORDS,
    description="segdist: closest-distance queries between 3D lines and line segments",
    long_description=DESCRIPTION,
    long_description_content_type="text/markdown",
    include_package_data=True,
    zip_safe=False,
    install_requires=REQUIREMENTS,
    extras_require={'test': TEST_REQUIREMENTS},
)

setup(**setup_info)
