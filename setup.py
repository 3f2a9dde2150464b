import setuptools

setuptools.setup(
	name='formatted-debug',
	version='0.2.0',
	packages=[
		'formatted_debug',
		'formatted_debug.tables',
	],
	python_requires='>=3.9',
	description='Draw tables of text with box-drawing characters, nested tables and all',
	long_description=open('README.md', encoding='utf-8').read(),
	long_description_content_type="text/markdown",
	classifiers=[
		"Programming Language :: Python :: 3.9",
		"License :: OSI Approved :: MIT License",
		"Operating System :: OS Independent",
		"Topic :: Software Development :: Debuggers",
		"Topic :: Text Processing",
		"Development Status :: 3 - Alpha",
    ],
)
