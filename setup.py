from setuptools import setup,find_packages
import os
import re

def read(f):
    return open(f, 'r', encoding='utf-8').read()

def get_version(package):
    """
    Return package version as listed in `__version__` in `init.py`.
    """
    init_py = open(os.path.join(package, '__init__.py')).read()
    return re.search("__version__ = ['\"]([^'\"]+)['\"]", init_py).group(1)


version = get_version('crudtodo')

setup(
	name="crudtodo",
	version=version,
	url='',
	license='BSD',
	description='Todo record store with store-allocated identifiers.',
	long_description=read('README.md'),
	long_description_content_type='text/markdown',
	author='Luccas Correa',
	author_email='luccascorrea@estudio89.com.br',
	packages=find_packages(exclude=['tests*']),
	include_package_data=True,
	install_requires=["filelock>3.7.1"],
    extras_require={
        "test": "pytest >= 7.0"
    },
	python_requires=">=3.8",
	classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Database',
	]
)
