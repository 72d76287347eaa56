"""Shared test fixtures: sample Objective-C sources and projects."""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from locextract.config.schema import LocExtractConfig
from locextract.project import Project


@pytest.fixture
def sample_source() -> str:
    """A view controller with a few well-formed calls."""
    return textwrap.dedent("""\
        #import "ViewController.h"

        @implementation ViewController

        - (void)viewDidLoad {
            [super viewDidLoad];
            self.title = NSLocalizedString(@"Settings", @"title of the settings screen");
            [self.button setTitle:HTLocalizedString(@"Save", nil) forState:UIControlStateNormal];
            self.label.text = NSLocalizedString(@"Don't panic", @"reassuring label");
        }

        @end
    """)


@pytest.fixture
def sample_source_malformed() -> str:
    """Calls that cannot be extracted statically."""
    return textwrap.dedent("""\
        - (void)update {
            NSString *a = NSLocalizedString(@"Hello " + name, @"greeting");
            NSString *b = NSLocalizedString(key, @"computed key");
            NSString *c = NSLocalizedString(@"Fine", @"ok");
        }
    """)


@pytest.fixture
def config() -> LocExtractConfig:
    cfg = LocExtractConfig()
    cfg.project.id = "webapp"
    return cfg


@pytest.fixture
def project(config: LocExtractConfig, tmp_path: Path) -> Project:
    return Project(config, tmp_path)


@pytest.fixture
def objc_tree(tmp_path: Path) -> Path:
    """A small Xcode-like project tree on disk."""
    classes = tmp_path / "Classes"
    classes.mkdir()
    (classes / "Main.m").write_text(
        'label.text = NSLocalizedString(@"Welcome", @"home screen greeting");\n'
        'button.title = NSLocalizedString(@"Log in", nil);\n',
        encoding="utf-8",
    )
    (classes / "Strings.h").write_text(
        '#define TITLE HTLocalizedString(@"Inbox", @"mailbox title")\n',
        encoding="utf-8",
    )
    (classes / "Broken.m").write_text(
        'x = NSLocalizedString(titleKey, @"dynamic");\n',
        encoding="utf-8",
    )
    pods = tmp_path / "Pods" / "Lib"
    pods.mkdir(parents=True)
    (pods / "Vendor.m").write_text('NSLocalizedString(@"Third party", nil);\n', encoding="utf-8")
    (tmp_path / "README.md").write_text('NSLocalizedString(@"Not code", nil)\n', encoding="utf-8")
    return tmp_path
