#!/usr/bin/env python

from setuptools import setup

schemelex_version = '0.1.0'

setup(name='schemelex',
      version=schemelex_version,
      description='a lexer for R7RS Scheme source text',
      author='Eric Siedel, Michael Walter, N Lance Hepler',
      packages=[
        'schemelex',
        'schemelex.parser'
      ],
      package_dir={
        'schemelex': 'schemelex',
      },
      python_requires='>=3.6',
      install_requires=[
        'pyPEG2>=2.15'
      ],
      extras_require={
        'test': [
          'pytest'
        ]
      }
     )
