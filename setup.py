# -*- coding: utf-8 -*-
from setuptools import setup, find_packages

install_reqs = [
    'fabio>=0.11',
    'h5py',
    'numpy',
    'pyyaml',
]

test_reqs = [
    'pytest',
]

# use entry_points, not scripts:
entry_points = {
    'console_scripts': ["bfcompat = bfcompat.cli.main:main"]
}

setup(
    name='bfcompat',
    version='0.1.0',
    description='legacy multi-series image readers in a structured metadata model',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='BSD',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
    ],
    entry_points=entry_points,
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.9',
    install_requires=install_reqs,
    extras_require={'test': test_reqs},
)
