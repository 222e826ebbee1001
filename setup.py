from setuptools import setup

setup(
    name='pybufkit',
    version='0.1.0',
    author='daryl herzmann',
    author_email='akrherz@gmail.com',
    package_dir={'': 'src'},
    packages=['pybufkit', 'pybufkit.models'],
    url='https://github.com/akrherz/pybufkit/',
    download_url='',
    keywords=['weather', 'bufkit', 'sounding'],
    classifiers=[],
    license='Apache',
    python_requires='>=3.9',
    install_requires=[
        'metpy',
        'numpy',
        'pandas',
        'pydantic>=2',
        'shapely',
    ],
    extras_require={
        'test': ['pytest', 'mock'],
    },
    description=('Reader for BUFKIT model forecast sounding files.'),
    include_package_data=True,
)
