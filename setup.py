import setuptools

setuptools.setup(
    name = 'ndspline',
    version = '1.0',
    description = 'spline curves through points in any number of dimensions',
    packages = setuptools.find_packages(exclude=['tests']),
    install_requires=['numpy', 'scipy>=1.0'],
    extras_require={'test': ['pytest']},
    python_requires='>=3.6',
)
