import os
import csv
import json
from pathlib import Path
import gspread
from oauth2client.service_account import ServiceAccountCredentials

# ID таблицы со списками заклинаний
SPREADSHEET_ID = os.environ.get("SPREADSHEET_ID", "").strip()

# Имена листов; имя листа становится именем CSV: "Wizard" -> Wizard.csv (заклинания волшебника)
SHEET_NAMES = [s.strip() for s in os.environ.get("SPELL_SHEETS", "Wizard,Cleric").split(",") if s.strip()]

# Папка для сохранения CSV
DATA_DIR = Path(os.environ.get("SPELL_DATA_DIR", "data"))

# Конвертер ждёт только строки данных, поэтому заголовок листа отбрасывается
SKIP_HEADER = os.environ.get("SPELL_SHEETS_HEADER", "1").strip() != "0"

SCOPE = ["https://spreadsheets.google.com/feeds", "https://www.googleapis.com/auth/drive"]


def fetch_sheet_to_csv(spreadsheet, sheet_name, data_dir=DATA_DIR, skip_header=SKIP_HEADER):
    """Читает лист и сохраняет как CSV без заголовка."""
    worksheet = spreadsheet.worksheet(sheet_name)
    # Читаем все значения (список списков)
    records = worksheet.get_all_values()
    if skip_header:
        records = records[1:]
    # --- safety: пустые строки в конце листа приходят как ["", "", ...] ---
    rows = [r for r in records if any(cell.strip() for cell in r)]
    if not rows:
        print(f"Лист {sheet_name} пуст, пропускаем")
        return 0

    data_dir.mkdir(parents=True, exist_ok=True)
    csv_path = data_dir / f"{sheet_name}.csv"
    with open(csv_path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)
    print(f"✓ {sheet_name}.csv сохранён, {len(rows)} строк")
    return len(rows)


def authorize(creds_json):
    if not creds_json:
        raise ValueError("GCP_SERVICE_ACCOUNT_KEY environment variable not set")

    # Загружаем ключ из строки JSON
    creds_dict = json.loads(creds_json)
    credentials = ServiceAccountCredentials.from_json_keyfile_dict(creds_dict, SCOPE)
    return gspread.authorize(credentials)


def main():
    # Ключ берётся из переменной окружения (секрета GitHub)
    gc = authorize(os.environ.get("GCP_SERVICE_ACCOUNT_KEY"))
    if not SPREADSHEET_ID:
        raise ValueError("SPREADSHEET_ID environment variable not set")

    sh = gc.open_by_key(SPREADSHEET_ID)

    for sheet_name in SHEET_NAMES:
        try:
            fetch_sheet_to_csv(sh, sheet_name, DATA_DIR, SKIP_HEADER)
        except Exception as e:
            print(f"Ошибка при обработке листа {sheet_name}: {e}")

            raise  # Если ошибка, прекращаем выполнение


if __name__ == "__main__":
    main()
