import setuptools
import os

own_dir = os.path.abspath(os.path.dirname(__file__))


def requirements():
    with open(os.path.join(own_dir, 'requirements.txt')) as f:
        for line in f.readlines():
            line = line.strip()
            if not line or line.startswith('#'):
                continue

            yield line


def modules():
    return [
        'gitutil',
        'makoutil',
    ]


def version():
    with open(os.path.join(own_dir, 'VERSION')) as f:
        return f.read().strip()


setuptools.setup(
    name='ticket-release-notes',
    version=version(),
    description='Render release notes from tickets referenced by commits of a release-branch',
    python_requires='>=3.11',
    py_modules=modules(),
    packages=['ci', 'release_notes'],
    install_requires=list(requirements()),
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': [
            'release-notes-from-tickets = release_notes.cli:main',
        ],
    },
)
