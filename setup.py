from setuptools import setup


with open('README.rst', 'r') as f:
    # skip the banners
    lines = f.readlines()[6:]
    long_desc = ''.join(lines)

setup(
    name='pygamma',
    version='1.0.0',
    description='Graph primitives and maximum-cardinality matching in general graphs',
    long_description=long_desc,
    long_description_content_type='text/x-rst',
    license='BSD 2-Clause',
    packages=['pygamma'],
    install_requires=[
        'numpy>=1.9',
        'scipy>=1.4.0',
    ],
    python_requires='>=3.9'
)
