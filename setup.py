"""Build configuration for Sticker Quote.

Usage:
    pip install -e .[test]          # install with test tools
    python setup.py py2app          # macOS only: build dist/Sticker Quote.app
"""
import sys

from setuptools import setup

APP = ['sticker_app.py']
DATA_FILES = []
OPTIONS = {
    'argv_emulation': False,  # must be False for Qt apps
    'plist': {
        'CFBundleName': 'Sticker Quote',
        'CFBundleDisplayName': 'Sticker Quote',
        'CFBundleIdentifier': 'com.stickerking.quote',
        'CFBundleVersion': '1.0.0',
        'CFBundleShortVersionString': '1.0',
        'LSMinimumSystemVersion': '11.0',
        'NSHighResolutionCapable': True,
    },
    'packages': ['PySide6', 'PIL'],
    'strip': False,  # avoid "Operation not permitted" on macOS SIP-protected binaries
}

# py2app is only needed (and only installable) when building the macOS bundle
app_kwargs = {}
if 'py2app' in sys.argv:
    app_kwargs = dict(
        app=APP,
        data_files=DATA_FILES,
        options={'py2app': OPTIONS},
        setup_requires=['py2app'],
    )

setup(
    name='sticker-quote',
    version='1.0.0',
    description='Quote vinyl sticker printing jobs and export PDF quotes',
    python_requires='>=3.10',
    py_modules=[
        'branding', 'calculator', 'controller', 'document', 'formatter',
        'models', 'quote', 'quote_cli', 'sticker_app', 'storage', 'views',
    ],
    install_requires=['PySide6>=6.4', 'Pillow>=10.1'],
    extras_require={'test': ['pytest', 'pytest-qt']},
    entry_points={
        'gui_scripts': ['sticker-quote = sticker_app:main'],
        'console_scripts': ['sticker-quote-cli = quote_cli:main'],
    },
    **app_kwargs,
)
