from setuptools import setup, find_packages

setup(
    name="eigenstrat-tools",
    version="0.1",
    packages=find_packages(),
    python_requires=">=3.7",
    install_requires=[
          'jsonschema>=4.5',
          'packaging'
    ],
    extras_require={
          'test': ['pytest']
    }
)
