"""Built-in Homebrew formula templates, one per distribution channel."""

from __future__ import annotations

LATEST = "latest"
PINNED = "pinned"

PLACEHOLDERS = ("description", "homepage", "repo", "bin", "shasum", "version")

# placeholder -> formula field it ends up in
FORMULA_FIELDS = {
    "description": "desc",
    "homepage": "homepage",
    "repo": "url",
    "bin": "bin.install",
    "shasum": "sha256",
    "version": "version",
}

# Always tracks the most recent GitHub release asset.
LATEST_TEMPLATE = """\
class TPAWSCli < Formula
  desc "{{description}}"
  homepage "{{homepage}}"
  url "{{repo}}/releases/latest/download/{{bin}}.tar.gz"
  sha256 "{{shasum}}"
  version "{{version}}"

  def install
    bin.install "{{bin}}"
  end
end
"""

# Points at the asset of one tagged release.
PINNED_TEMPLATE = """\
class Tpaws < Formula
  desc "{{description}}"
  homepage "{{homepage}}"
  url "{{repo}}/releases/download/{{version}}/{{bin}}.tar.gz"
  sha256 "{{shasum}}"
  version "{{version}}"

  def install
    bin.install "{{bin}}"
  end
end
"""

TEMPLATES = {
    LATEST: LATEST_TEMPLATE,
    PINNED: PINNED_TEMPLATE,
}


def get_template(channel: str) -> str:
    try:
        return TEMPLATES[channel]
    except KeyError:
        raise ValueError(
            f"Unknown channel '{channel}'. Available: {sorted(TEMPLATES)}"
        ) from None
