"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='prefix-calculator',
	version='0.3.0',
	packages=['pcalc'],
	license='MIT',
	description='A prefix-notation calculator with variables, functions, and conditionals',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Education",
		"Topic :: Software Development :: Interpreters",
		"Topic :: Scientific/Engineering :: Mathematics",
		"Environment :: Console",
    ],
	python_requires='>=3.9',
	install_requires=[
		"booze-tools>=0.6.2.1",
	],
	extras_require={
		'test': ["pytest"],
	},
)
