"""Korean UI strings."""

STRINGS: dict[str, str] = {
    "Universal Video Converter": "범용 비디오 변환기",
    "Inspect a video with ffprobe and transcode it with ffmpeg using presets "
    "that adapt to the detected container and codecs.":
        "ffprobe로 비디오를 분석하고, 감지된 컨테이너와 코덱에 맞는 프리셋으로 ffmpeg 변환을 수행합니다.",
    "Requires ffmpeg and ffprobe to be installed and available in your PATH.":
        "ffmpeg와 ffprobe가 설치되어 PATH에서 실행 가능해야 합니다.",
    "Choose Video…": "비디오 선택…",
    "No video selected": "선택된 비디오 없음",
    "Reading metadata…": "메타데이터 읽는 중…",
    "Metadata": "메타데이터",
    "Container": "컨테이너",
    "Detected formats": "감지된 포맷",
    "Duration": "길이",
    "Video": "비디오",
    "Audio": "오디오",
    "Unknown": "알 수 없음",
    "ffprobe output": "ffprobe 출력",
    "Available conversion presets": "사용 가능한 변환 프리셋",
    "No metadata-specific recommendation was found, so the full preset library is shown.":
        "메타데이터에 맞는 추천 프리셋이 없어 전체 프리셋 목록을 표시합니다.",
    "Convert": "변환",
    "ffmpeg log": "ffmpeg 로그",
    "None": "없음",
    "Video Files": "비디오 파일",
    "All Files": "모든 파일",
    "The window will close when the conversion finishes.": "변환이 끝나면 창이 닫힙니다.",

    # 상태 메시지 / 로그
    "Metadata loaded": "메타데이터를 불러왔습니다",
    "Error: failed to read metadata. Ensure ffprobe is installed "
    "and accessible in PATH. ({error})":
        "오류: 메타데이터를 읽지 못했습니다. ffprobe가 설치되어 PATH에서 실행 가능한지 확인하세요. ({error})",
    "Starting conversion…": "변환 시작…",
    "Finished: {name}": "완료: {name}",
    "Error: {error}": "오류: {error}",
    "Saved to: {path}": "저장 위치: {path}",
    "ffmpeg completed without additional output.": "ffmpeg가 추가 출력 없이 완료되었습니다.",
    "Process exited with an unknown error.": "알 수 없는 오류로 프로세스가 종료되었습니다.",
}
