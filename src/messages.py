# User-facing strings for the upload endpoint and the upload form.

MESSAGES = {
    "en": {
        "no_file": "No file was uploaded",
        "too_large": "File is too large. Please upload a file of 10MB or less.",
        "unsupported_type": "Unsupported file format. Please upload a PDF, TXT, DOC or DOCX file.",
        "content_mismatch": "File content does not match its declared type.",
        "upload_error": "An error occurred during upload",
        "uploaded": "File uploaded successfully",
        "select_file": "Please select a file",
        "upload_failed": "Upload failed",
        "network_error": "A network error occurred",
        "file_read_error": "The selected file could not be read",
    },
    "ja": {
        "no_file": "ファイルがアップロードされませんでした",
        "too_large": "ファイルサイズが大きすぎます。10MB以下のファイルをアップロードしてください。",
        "unsupported_type": "対応していないファイル形式です。PDF、TXT、DOC、DOCXファイルをアップロードしてください。",
        "content_mismatch": "ファイルの内容が宣言された形式と一致しません。",
        "upload_error": "ファイルアップロード中にエラーが発生しました",
        "uploaded": "ファイルが正常にアップロードされました",
        "select_file": "ファイルを選択してください",
        "upload_failed": "アップロードに失敗しました",
        "network_error": "ネットワークエラーが発生しました",
        "file_read_error": "選択されたファイルを読み込めませんでした",
    },
}

DEFAULT_LANGUAGE = "en"


def message(key, lang=DEFAULT_LANGUAGE):
    table = MESSAGES.get(lang, MESSAGES[DEFAULT_LANGUAGE])
    return table.get(key) or MESSAGES[DEFAULT_LANGUAGE][key]
