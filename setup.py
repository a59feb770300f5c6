from setuptools import setup, find_packages
from codecs import open
from os import path


here = path.abspath(path.dirname(__file__))


with open(path.join(here, 'README.rst'), encoding='utf-8') as f:
    long_description = f.read()

with open(path.join(here, 'perfpro', '__init__.py')) as pkg:
    __version__ = eval(pkg.readline().split('=')[1])


setup(
    name='perfpro',
    version=__version__,
    description='Convert PerfPro .3dp workout files to TCX',
    long_description=long_description,
    license='MIT',
    keywords='exercise cycling perfpro tcx garmin strava data',

    # See https://pypi.python.org/pypi?%3Aaction=list_classifiers
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: End Users/Desktop',
        'Topic :: Scientific/Engineering :: Medical Science Apps.',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],

    packages=find_packages(),
    python_requires='>=3.8',
    install_requires=[
        'numpy>=1.20',
        'pandas>=1.3',
        'pytz>=2011.11',
    ],
    extras_require={
        'test': ['pytest>=6'],
    },
    entry_points={
        'console_scripts': [
            'perfpro=perfpro._util.cli:convert',
        ],
    },
)
