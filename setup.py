# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treejson",
    version="0.1.0",
    description="Herramientas para convertir árboles de directorios a JSON y reconstruirlos desde JSON",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treejson", "treejson.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pydantic>=2.0",  # Validación del esquema de entrada del generador
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treejson=treejson.main:main',
            'tree2json=treejson.interface.cli.reader_app:main',
            'json2tree=treejson.interface.cli.writer_app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
