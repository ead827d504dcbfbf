# ======================== COACH PERSONAS ========================
# Keyed by the `mode` sent from the chat screen.
DEFAULT_COACH_ID = "tanaka"

COACH_PROMPTS = {
    "tanaka": "あなたは経験豊富なビジネス戦略コーチ田中健一です。論理的思考と結果重視のアプローチで、具体的で実行可能なアクションプランを提案します。経営戦略、事業開発、リーダーシップの分野が専門です。常に「田中です」と自己紹介し、相手を「さん」付けで呼びます。",
    "sato": "あなたは優秀なキャリア・コミュニケーションコーチ佐藤美咲です。共感力が高く、相手の気持ちに寄り添いながら、キャリア開発、人間関係、プレゼンテーションスキルの向上をサポートします。常に「佐藤です」と自己紹介し、温かい口調で話します。",
    "yamada": "あなたは実績豊富な営業・マーケティングコーチ山田雄介です。実践的で行動重視のアプローチで、営業戦略、顧客対応、マーケティングで成果に直結するアドバイスを提供します。常に「山田です」と自己紹介し、エネルギッシュな口調で話します。",
    "suzuki": "あなたは優しい働き方・メンタルヘルスコーチ鈴木智子です。包容力があり心のケアを重視し、ワークライフバランス、ストレス管理、チームワーク向上をサポートします。常に「鈴木です」と自己紹介し、優しく丁寧な口調で話します。",
}

# ======================== INDUSTRY KNOWLEDGE BASE ========================
INDUSTRY_KNOWLEDGE_BASE = {
    "manufacturer": {
        "cultural_traits": [
            "年功序列の傾向が強い（企業の歴史・規模に比例）",
            "稟議制中心の意思決定（同族オーナー企業はトップダウン）",
            "階層重視の直接コミュニケーション、メール文化",
            "製品アップデート・プロトタイプ生産サイクルが早く変化対応力がある",
        ],
        "common_challenges": [
            "B2B大規模商品：直接営業・担当営業制で新規開拓が困難",
            "B2B小規模製品：販売代理店経由、代理店向け営業が主流",
            "製品ライフサイクルが早く生産ライン対応が頻繁",
            "ミドル層不足が顕著：高齢ベテラン×経験不足若手の二極化",
            "高齢層の研修効果著しく低下、DX・システム化の妨げ",
        ],
        "success_patterns": [
            "埼玉トヨペット手法：トップダウンを利かせた組織風土変化（成果差2.25倍）",
            "浸透計画：役員→エリア別営業本部長→エリアマネージャー→店長→全社員の順番",
            "ミドル層不足対応：採用企画全面見直しによる採用強化",
            "高齢層対応：研修ではなく、彼らの持つ資産活用に注力",
            "DX推進：CDXO設定、抵抗勢力の関与度減少、直接的メリット提示",
        ],
    },
    "real_estate": {
        "cultural_traits": [
            "売買・賃貸：営業は実績優先、体育会系・ペースセッター型リーダーシップ",
            "ゼネコン：メーカーに近い文化、稟議制",
            "ディベロッパー：商社傾向、デジタルツール導入進行でIT系に近い",
        ],
        "common_challenges": [
            "売買・賃貸：個人営業スキルバラツキ大、KPI設計を飛ばしたアクション管理",
            "ゼネコン：組織的営業、技術分野との激論、役職高位者が全権",
            "ディベロッパー：大規模案件、個人業務範囲限定",
            "円安・原価高によるコスト管理困難（ゼネコン・ディベロッパー国内）",
        ],
        "success_patterns": [
            "キーエンス手法活用：トップ営業マン分析→商談パターン徹底分析→業務型化",
            "研修&OJT：店長クラスから下への段階的落とし込み",
            "KPI設計：定量データ紐付けマネジメント仕組み構築",
            "ビジネススキル研修：ステークホルダーマネジメント、プロジェクトマネジメント",
            "新卒育成：コンサル業界近似の思考トレーニング導入",
        ],
    },
    "it": {
        "cultural_traits": [
            "2000年以前設立：メーカーに近いレベルの年功序列、体育会系文化",
            "2000年以降設立：非常にフラット、GAFAM模倣組織風土",
            "ジョブホッパー文化：個人スキル・年収アップ重視、様々環境での知見蓄積",
        ],
        "common_challenges": [
            "エンジニア×ビジネス組織の価値観ギャップ：品質重視vs納期重視",
            "プロジェクトスコープ曖昧：営業提案時→開発開始後の大幅拡大",
            "人材定着困難：常駐後の会社帰属意識形成困難→高離職率",
            "スコープ強制拡大・期間短縮→想定上リソース→残業過多",
        ],
        "success_patterns": [
            "頭×こころのギャップ解消：ロジカルシンキング活用（理解）×コーチング・リーダーシップ論（共感）",
            "ECRSフレームワーク：案件ごとにスコープ決定軸を定める→言語化し顧客と合意",
            "営業力強化：目標/目的設定明確化×WBS（Work Breakdown Structure）クオリティ向上",
            "未解決課題：ジョブホッパー文化の中での優秀人材定着は明確な解決策未発見",
        ],
    },
    "automotive": {
        "cultural_traits": ["自動車業界特有の品質管理文化", "サプライチェーン重視"],
        "common_challenges": ["EV化対応", "グローバル競争激化"],
        "success_patterns": ["トヨタ生産方式", "カイゼン文化"],
    },
    "retail": {
        "cultural_traits": ["顧客第一主義", "店舗オペレーション重視"],
        "common_challenges": ["EC化対応", "人手不足", "オムニチャネル"],
        "success_patterns": ["データドリブン経営", "店舗DX"],
    },
    "consulting": {
        "cultural_traits": ["実力主義", "アウトプット重視", "論理思考"],
        "common_challenges": ["人材流出", "スケーラビリティ", "ナレッジ蓄積"],
        "success_patterns": ["メソドロジー体系化", "パートナーシップ構築"],
    },
    "advertising": {
        "cultural_traits": ["クリエイティブ重視", "スピード感", "トレンド敏感"],
        "common_challenges": ["デジタル化対応", "ROI測定", "クリエイター確保"],
        "success_patterns": ["データドリブンクリエイティブ", "アジャイル制作"],
    },
    "education": {
        "cultural_traits": ["教育効果重視", "長期視点", "個別対応"],
        "common_challenges": ["DX推進", "個別最適化", "エンゲージメント"],
        "success_patterns": ["適応学習", "LMS活用", "コミュニティ形成"],
    },
    "other": {
        "cultural_traits": ["業界固有の特性を持つ"],
        "common_challenges": ["業界特有の課題"],
        "success_patterns": ["ベストプラクティスの横展開"],
    },
}

INDUSTRY_LABELS = {
    "manufacturer": "メーカー・製造業",
    "real_estate": "不動産・建設業",
    "it": "IT・情報通信業",
    "automotive": "自動車業界",
    "retail": "小売・流通業",
    "consulting": "コンサルティング",
    "advertising": "広告・マーケティング",
    "education": "教育・研修業",
    "other": "その他",
}

COMPANY_SIZE_LABELS = {
    "1-9": "1-9名（スタートアップ・個人事業）",
    "10-50": "10-50名（小規模企業・ベンチャー）",
    "51-200": "51-200名（中小企業）",
    "201-1000": "201-1000名（中堅企業）",
    "1000+": "1000名以上（大企業）",
}

# ======================== INTERVIEW FALLBACKS ========================
INDUSTRY_FALLBACK_QUESTIONS = {
    "manufacturer": [
        {
            "id": "mfg_fb_01",
            "category": "challenges",
            "question": "製造現場で最も課題に感じているのは、生産効率・品質管理・人材確保のどれですか？具体的な状況を教えてください。",
            "context": "メーカー特有の課題（生産効率・品質・人材）の特定",
            "priority": "high",
        },
        {
            "id": "mfg_fb_02",
            "category": "organization",
            "question": "稟議制度や意思決定プロセスで、スピードアップしたいと感じる場面はありますか？",
            "context": "メーカー特有の組織課題（稟議制・意思決定）の把握",
            "priority": "medium",
        },
        {
            "id": "mfg_fb_03",
            "category": "goals",
            "question": "DX推進において、最も期待している効果や改善点は何ですか？",
            "context": "メーカーのDX推進における期待と課題",
            "priority": "medium",
        },
    ],
    "real_estate": [
        {
            "id": "re_fb_01",
            "category": "challenges",
            "question": "営業メンバーの成績にバラツキがある場合、その主な原因は何だと考えますか？",
            "context": "不動産営業特有の課題（スキルバラツキ）の把握",
            "priority": "high",
        },
        {
            "id": "re_fb_02",
            "category": "workflow",
            "question": "顧客対応で最も時間がかかっている業務は何ですか？効率化できそうな部分はありますか？",
            "context": "不動産業務の効率化ポイント特定",
            "priority": "medium",
        },
        {
            "id": "re_fb_03",
            "category": "goals",
            "question": "売上目標達成のために、チーム全体で改善したい点は何ですか？",
            "context": "不動産営業チームの目標達成戦略",
            "priority": "high",
        },
    ],
    "it": [
        {
            "id": "it_fb_01",
            "category": "challenges",
            "question": "エンジニアとビジネスサイドの連携で、最も改善したい点は何ですか？",
            "context": "IT業界特有の課題（エンジニア×ビジネス連携）",
            "priority": "high",
        },
        {
            "id": "it_fb_02",
            "category": "workflow",
            "question": "プロジェクトでスコープが曖昧になる主な原因は何だと考えますか？",
            "context": "IT業界特有の課題（スコープ管理）",
            "priority": "high",
        },
        {
            "id": "it_fb_03",
            "category": "goals",
            "question": "開発効率を向上させるために、最も重要だと思う改善点は何ですか？",
            "context": "IT業界の開発効率向上戦略",
            "priority": "medium",
        },
    ],
}

UNIVERSAL_FALLBACK_QUESTIONS = [
    {
        "id": "univ_fb_01",
        "category": "challenges",
        "question": "現在抱えている課題の中で、解決すると最もインパクトが大きいものは何ですか？",
        "context": "課題の優先順位と影響度の特定",
        "priority": "high",
    },
    {
        "id": "univ_fb_02",
        "category": "goals",
        "question": "3ヶ月後に「大きく前進した」と感じるための最重要目標は何ですか？",
        "context": "短期目標の明確化と達成基準設定",
        "priority": "high",
    },
    {
        "id": "univ_fb_03",
        "category": "workflow",
        "question": "日々の業務で「これがもっと効率的になれば」と感じる作業は何ですか？",
        "context": "業務効率化の具体的ポイント特定",
        "priority": "medium",
    },
]

EMERGENCY_QUESTIONS = [
    {
        "id": "emergency_01",
        "category": "challenges",
        "question": "現在最も優先して解決したい課題は何ですか？その課題によってどのような影響が出ていますか？",
        "context": "優先課題の特定と影響度の把握",
        "priority": "high",
    },
    {
        "id": "emergency_02",
        "category": "goals",
        "question": "3ヶ月以内に達成したい最も重要な目標を1つ教えてください。",
        "context": "短期目標の明確化",
        "priority": "high",
    },
]

INDUSTRY_FALLBACK_INSIGHTS = {
    "manufacturer": [
        "製造業特有の組織課題について理解を深めました",
        "年功序列や稟議制度の影響を考慮したアドバイスが可能になります",
    ],
    "real_estate": [
        "不動産業界の営業環境について具体的な情報を得られました",
        "体育会系組織での成果向上に焦点を当てたサポートが提供できます",
    ],
    "it": [
        "IT業界特有のプロジェクト管理課題について深掘りできました",
        "エンジニアとビジネスサイドの連携改善に重点を置いたコーチングが可能です",
    ],
}

DEFAULT_ANALYSIS_INSIGHTS = [
    "ヒアリングが正常に完了しました",
    "より詳細な情報を収集できたため、パーソナライズされたコーチングが提供できます",
    "今後のセッションでは、お答えいただいた内容を踏まえたアドバイスを行います",
]

# ======================== SYSTEM PROMPTS ========================
INTERVIEW_GENERATOR_SYSTEM_PROMPT = "あなたは効率的な質問を生成する専門家です。簡潔で実用的な質問をJSON形式で回答してください。"

INTERVIEW_ANALYST_SYSTEM_PROMPT = "あなたは経験豊富なビジネスコーチ・組織コンサルタントで、クライアントのヒアリング結果から実用的なインサイトを抽出する専門家です。JSON形式で回答してください。"

# Columns the AI auto-update is allowed to touch on a project card.
PROJECT_EDITABLE_FIELDS = [
    "project_name",
    "objectives",
    "project_period",
    "project_purpose",
    "project_goals",
    "user_role",
    "user_personal_goals",
    "kpis",
    "important_decisions",
]

# ======================== USER-FACING MESSAGES ========================
ERROR_MESSAGES = {
    "ai_busy": "AIサービスが混雑しています。少し時間をおいて再度お試しください。",
    "ai_bad_request": "リクエストに問題があります。入力内容を確認してください。",
    "ai_unavailable": "AIサービスに接続できませんでした。しばらく後にお試しください。",
    "transcribe_busy": "音声認識サービスが混雑しています。少し時間をおいて再度お試しください。",
    "transcribe_bad_file": "音声ファイルを処理できませんでした。別の形式でお試しください。",
    "ai_update_failed": "AI更新に失敗しました",
    "not_found": "データが見つかりません",
    "transcribe_failed": "音声認識に失敗しました。もう一度お試しください。",
    "audio_missing": "音声データが提供されていません。",
    "audio_too_large": "ファイルサイズが大きすぎます。25MB以下のファイルをアップロードしてください。",
    "audio_unsupported": "サポートされていないファイル形式です。音声ファイル（MP3、WAV、M4A等）をアップロードしてください。",
    "audio_empty": "空のファイルです。音声を録音してから送信してください。",
    "invalid_request": "入力内容に問題があります。",
    "unauthorized": "Unauthorized",
    "internal": "Internal Server Error",
}

RATE_LIMIT_LABELS = {
    "chat": "",
    "transcribe": "音声認識の",
    "interview_generate": "ヒアリング質問生成の",
    "interview_analyze": "ヒアリング分析の",
}
