"""
Setup file for product_catalog
Installs the catalog package with its templates
"""

from setuptools import setup, find_packages

setup(
    name="product_catalog",
    version="1.0.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"catalog": ["templates/*.html"]},
    python_requires=">=3.10",
    install_requires=[
        'flask>=2.3.0',
        'flask-sqlalchemy>=3.1.0',
        'flask-wtf>=1.2.0',
        'pydantic>=2.5.0',
        'python-dotenv>=1.0.0',
        'faker>=20.0.0',
        'click>=8.1.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.4.0',
            'playwright>=1.40.0',
        ],
    },
)
