from src.rules.models import Rules


class RulesAdapter:
    """Serves the loaded rules file to every component's RulesPort."""

    def __init__(self, rules: Rules):
        self.rules = rules

    # --- media ---

    def get_image_extensions(self) -> frozenset[str]:
        return frozenset(self.rules.media.image_extensions)

    def get_video_extensions(self) -> frozenset[str]:
        return frozenset(self.rules.media.video_extensions)

    def get_case_insensitive_extensions(self) -> bool:
        return self.rules.media.case_insensitive_extensions

    def get_allowed_schemes(self) -> frozenset[str]:
        return frozenset(s.lower() for s in self.rules.media.allowed_schemes)

    def get_mime_overrides(self) -> dict[str, str]:
        return dict(self.rules.media.mime_overrides)

    # --- html ---

    def get_link_attribute(self) -> str:
        return self.rules.html.link_attribute

    def get_line_break(self) -> str:
        return self.rules.html.line_break

    # --- plain text ---

    def get_media_open(self) -> str:
        return self.rules.plaintext.media_open

    def get_media_close(self) -> str:
        return self.rules.plaintext.media_close

    def get_mention_prefix(self) -> str:
        return self.rules.plaintext.mention_prefix
