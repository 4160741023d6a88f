"""
teanga setup: teanga is a library for reading, writing and converting
corpora of layered linguistic annotations
"""

from setuptools import setup, find_packages
import glob
import os

REQS = [
    'funcparserlib >= 1.0.0',
    'frozendict >= 2.0',
    'tabulate',
]

TEST_REQS = [
    'pytest',
]


setup(name='teanga-layers',
      version='0.1',
      author='Eric Kow',
      author_email='eric@erickow.com',
      packages=find_packages(),
      scripts=[f for f in glob.glob('scripts/*') if not os.path.isdir(f)],
      python_requires='>=3.7',
      install_requires=REQS,
      extras_require={'test': TEST_REQS})
