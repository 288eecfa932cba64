"""Точка входа приложения предпросмотра."""
from ninepatch.app import NinePatchPreviewApp
from ninepatch.config import configure_logging


def main() -> None:
    """Настраивает логирование, создаёт и запускает главное окно."""
    configure_logging()
    app = NinePatchPreviewApp()
    app.mainloop()


if __name__ == "__main__":
    main()
