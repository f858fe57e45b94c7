"""
Project Templates
=================

Literal file contents written into a freshly scaffolded Vite + React project.

Only the README is parameterized (by project name); everything else is fixed.
"""

from typing import List, Tuple


SCAFFOLD_PACKAGE = 'vite@latest'
SCAFFOLD_TEMPLATE = 'react'

DEPENDENCIES: Tuple[str, ...] = (
    'tailwindcss',
    '@tailwindcss/vite',
    'zustand',
    '@tanstack/react-query',
)

# Feature-Sliced Design layers, relative to the project root
FSD_DIRECTORIES: Tuple[str, ...] = (
    'src/app',
    'src/processes',
    'src/pages',
    'src/widgets',
    'src/features',
    'src/entities',
    'src/shared/api',
    'src/shared/config',
    'src/shared/lib',
    'src/shared/ui',
)

PLACEHOLDER_FILENAME = 'index.js'
PLACEHOLDER_CONTENT = "// 컴포넌트 export용 파일입니다."

VITE_CONFIG_PATH = 'vite.config.js'
GLOBAL_STYLES_PATH = 'src/index.css'
APP_COMPONENT_PATH = 'src/app/App.jsx'
MAIN_ENTRY_PATH = 'src/main.jsx'
README_PATH = 'README.md'

VITE_CONFIG = """import { defineConfig } from 'vite'
import react from '@vitejs/plugin-react'
import tailwindcss from '@tailwindcss/vite'

export default defineConfig({
  plugins: [
    react(),
    tailwindcss(),
  ],
})
"""

GLOBAL_STYLES = """@import "tailwindcss";

/* 전역 스타일을 이곳에 추가하세요 */
"""

APP_COMPONENT = """import { QueryClient, QueryClientProvider } from '@tanstack/react-query';
import '../index.css';

const queryClient = new QueryClient();

function App() {
  return (
    <QueryClientProvider client={queryClient}>
      <div className="min-h-screen bg-gray-100 flex items-center justify-center">
        <div className="p-6 max-w-sm w-full bg-white shadow-md rounded-lg">
          <h1 className="text-2xl font-bold text-gray-800 mb-4">
            FSD 아키텍처 프로젝트
          </h1>
          <p className="text-gray-600">
            Feature-Sliced Design 아키텍처를 사용한 프로젝트가 준비되었습니다.
          </p>
        </div>
      </div>
    </QueryClientProvider>
  );
}

export default App;
"""

MAIN_ENTRY = """import React from 'react'
import ReactDOM from 'react-dom/client'
import App from './app/App.jsx'
import './index.css'

ReactDOM.createRoot(document.getElementById('root')).render(
  <React.StrictMode>
    <App />
  </React.StrictMode>,
)
"""

README_TECH_STACK = """## 기술 스택
- React
- Vite
- Tailwind CSS v4 (Vite 플러그인 방식)
- Zustand (상태 관리)
- React Query (서버 상태 관리)
"""

README_FOLDER_STRUCTURE = """## 폴더 구조 (FSD 아키텍처)
- app/ - 애플리케이션 초기화, 전역 스타일 등
- processes/ - 비즈니스 프로세스와 workflows
- pages/ - 라우트에 해당하는 페이지 컴포넌트
- widgets/ - 페이지를 구성하는 독립적인 블록
- features/ - 사용자 상호작용을 다루는 기능
- entities/ - 비즈니스 엔티티(사용자, 상품 등)
- shared/ - 재사용 가능한 기능과 UI 컴포넌트
"""

README_GETTING_STARTED = """## 시작하기
```
npm install
npm run dev
```
"""


def render_readme(project_name: str) -> str:
    """Render README.md; the project name is inserted verbatim."""
    return (
        f"# {project_name}\n"
        "\n"
        f"{README_TECH_STACK}"
        "\n"
        f"{README_FOLDER_STRUCTURE}"
        "\n"
        f"{README_GETTING_STARTED}"
    )


def create_command(npm: str, project_name: str) -> List[str]:
    """Argument vector for the scaffolding tool."""
    return [npm, 'create', SCAFFOLD_PACKAGE, project_name, '--', '--template', SCAFFOLD_TEMPLATE]


def install_command(npm: str) -> List[str]:
    """Argument vector for the dependency installation."""
    return [npm, 'install', *DEPENDENCIES]
