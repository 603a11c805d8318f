"""
Setup settings — optional overrides read from starter-setup.yml.

Every field has a default, so a project without the file behaves
exactly like one with an empty file.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class SetupSettings(BaseModel):
    """Tunables for the external commands the setup runs."""

    composer: str = "composer"              # package manager executable
    php: str = "php"                        # interpreter used for artisan
    timeout: int = Field(default=600, ge=1)  # seconds per external command

    with_all_dependencies: bool = True
    no_interaction: bool = False

    post_install: bool = True               # run directive table after install

    env_file: str = ".env"
    env_template: str = ".env.example"
