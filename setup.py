import os

from setuptools import setup, find_packages

HERE = os.path.dirname(os.path.abspath(__file__))


def read_requirements(filename):
    with open(os.path.join(HERE, filename)) as f:
        return [
            line.strip()
            for line in f
            if line.strip() and not line.strip().startswith("#")
        ]


setup(
    name='enumerable-weakrefs',
    version='1.0.0',
    author='Matthew Wardrop',
    author_email='mpwardrop@gmail.com',
    description='Weak sets and mappings that can be enumerated and counted while their contents are garbage collected.',
    keywords='weakref weakset collections garbage-collection',
    python_requires='>=3.7',
    install_requires=read_requirements('requirements.txt'),
    extras_require={'test': read_requirements('requirements_test.txt')},
    packages=find_packages(exclude=['tests', 'tests.*']),
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.7',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
