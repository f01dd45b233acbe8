"""
Packaging script for PyPI.
"""
import setuptools

setuptools.setup(
	name='custom-enumerable',
	version='0.1.0',
	packages=['custom_enumerable'],
	entry_points={
		'console_scripts': ["custom-enumerable = custom_enumerable.cmdline:main"],
	},
	license='MIT',
	description='Generic sequence operations for anything that can visit its own elements in order',
	long_description=open('README.md').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.12",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Development Status :: 3 - Alpha",
		"Intended Audience :: Developers",
		"Topic :: Software Development :: Libraries",
		"Environment :: Console",
    ],
	python_requires='>=3.12',
	install_requires=[
		"booze-tools>=0.6.2.1",
	]
)
