from setuptools import setup, find_packages

install_packages = [ "scipy",
                     "numpy",
                     "pulp" ]

setup(
    name = 'cbcbind',
    version = '0.1',
    packages = find_packages(exclude=["test", "test.*", "examples"]),
    install_requires = install_packages,
    extras_require = { "test" : ["pytest"] }
)
