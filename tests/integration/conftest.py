"""Pytest configuration and shared fixtures for integration tests."""

import pytest

# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

CHINESE_SUBTITLE = (
    "\n"
    "1\n"
    "00:00:01,300 --> 00:00:08,240\n"
    "今天录制了专辑的第三首歌「Fluegel」\n"
    "\n"
    "2\n"
    "00:00:08,240 --> 00:00:12,400\n"
    "非常高卡路里的一首歌\n"
    "\n"
    "3\n"
    "00:00:12,400 --> 00:00:17,240\n"
    "非常有异域风情的很帅气的一首歌\n"
    "\n"
    "9\n"
    "00:00:39,760 --> 00:00:41,420\n"
    "看得到吗\n"
    "\n"
    "11\n"
    "00:00:45,200 --> 00:00:49,440\n"
    '这里写了"美丽系萨满第15年"\n'
    "\n"
    "12\n"
    "00:00:49,440 --> 00:00:53,000\n"
    '这里还有"人类"，"简单"，"真实体验"之类的\n'
    "\n"
    "16\n"
    "00:01:09,040 --> 00:01:10,700\n"
    "晚安~\n"
    "\n"
)

KOREAN_SUBTITLE = (
    "1\n"
    "00:03:17,440 --> 00:53:20,375\n"
    "칠레 한인회에서는  그동안 코로나-19로 인해서 빠트로나또 한인타운가가 5개월 동안 문을.\n"
    "정성기 칠레 한인회장님께서 방역 활동을 하고 계십니다.  방역 활동 구역은 만사노, 산타.\n"
    "황성남 한인회이사님께서도 방역 활동에 동참 해 주셨습니다.\n"
    "\n"
    "2\n"
    "00:54:20,476 --> 03:16:22,501\n"
    "까날 트레쎄 13번 칠레 방송국에서 빠트로나또 개장 현황을 취재하던 중에 한인회의.\n"
    "촬영이 끝난 후 인터뷰 요청이 있어서 정성기 한인회장님께서 인터뷰를 하게 되었습니다. \n"
    "금일 9월7일 월요일 밤 9시 뉴스시간에 촬영 및 인터뷰 내용이 방영 된다고 합니다.\n"
    "<ref></ref>우리 모두 코로나-19 퇴치 운동에 적극 동참하여 또 다시 자가격리로 되돌.\n"
    "\n"
)


@pytest.fixture
def chinese_subtitle() -> str:
    """Return a Chinese document with a leading blank line and quoted text."""
    return CHINESE_SUBTITLE


@pytest.fixture
def korean_subtitle() -> str:
    """Return a Korean document with multi-line captions and inline tags."""
    return KOREAN_SUBTITLE
