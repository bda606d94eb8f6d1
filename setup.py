# Copyright (c) 2017-2025 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from setuptools import find_packages, setup


setup(
    name='railroadinator',
    version='1.0.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    url='https://github.com/renatahodovan/railroadinator',
    license='BSD',
    author='Renata Hodovan, Akos Kiss',
    author_email='hodovan@inf.u-szeged.hu, akiss@inf.u-szeged.hu',
    description='Railroadinator: Railroad Diagram Documentation for ANTLRv4 Grammars',
    long_description=open('README.rst').read(),
    python_requires='>=3.9',
    install_requires=['antlr4-python3-runtime', 'grammarinator', 'inators', 'jinja2', 'markupsafe', 'railroad-diagrams', 'regex'],
    extras_require={
        'test': ['pytest'],
    },
    zip_safe=False,
    include_package_data=True,
    package_data={
        'railroadinator.tool': ['resources/*'],
    },
    entry_points={
        'console_scripts': [
            'railroadinator = railroadinator.process:execute',
        ]
    },
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Documentation',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
)
