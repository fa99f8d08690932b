from setuptools import setup, find_packages

setup(
    name='starcross',
    version='1.0.0',
    description='Import, cross match and merge fixed column star catalogs',
    packages=find_packages(exclude=['unittests', 'unittests.*']),
    python_requires='>=3.10',
    install_requires=['numpy', 'pandas'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['starcross-import-gliese=starcross.scripts.import_gliese:main']},
)
